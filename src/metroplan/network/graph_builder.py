"""Build the adjacency graph used by the flow and spanning-tree planners."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Sequence

from .domain_types import MAX_CAPACITY, Edge, Station, Track
from .errors import NetworkIntegrityError, UnknownStationError

logger = logging.getLogger(__name__)


@dataclass
class TransitGraph:
    """Stations, tracks and the merged directed adjacency derived from them."""

    stations: List[Station]
    tracks: List[Track]
    station_index: Dict[Hashable, int]
    adjacency: List[List[Edge]] = field(default_factory=list)

    # ---------------------------------------------------------------- properties
    @property
    def num_stations(self) -> int:
        return len(self.stations)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency)

    # ----------------------------------------------------------------- lookups
    def index_of(self, station_id: Hashable) -> int:
        try:
            return self.station_index[station_id]
        except (KeyError, TypeError):
            raise UnknownStationError(station_id) from None

    def station(self, station_id: Hashable) -> Station:
        return self.stations[self.index_of(station_id)]

    def occupants(self, station_id: Hashable) -> int:
        return self.station(station_id).occupants

    def effective_capacity(self, track: Track) -> int:
        """Declared capacity capped by the occupants of both endpoints."""
        return min(
            track.capacity,
            self.occupants(track.start),
            self.occupants(track.end),
        )

    def edge_capacity(self, u: int, v: int) -> int:
        """Return the merged capacity of the edge ``u -> v`` or 0 if absent."""
        for edge in self.adjacency[u]:
            if edge.target == v:
                return edge.capacity
        return 0

    def outgoing_capacity(self, station_id: Hashable) -> int:
        return sum(edge.capacity for edge in self.adjacency[self.index_of(station_id)])


class GraphBuilder:
    """Turns station and track records into a :class:`TransitGraph`.

    Stations are indexed in input order. Each track contributes its effective
    capacity to a single directed edge per ordered station pair, so parallel
    tracks add up. Reverse edges are never created implicitly.
    """

    def build(
        self,
        stations: Optional[Sequence[Station]],
        tracks: Optional[Sequence[Track]],
    ) -> TransitGraph:
        station_list = list(stations or [])
        track_list = list(tracks or [])

        station_index: Dict[Hashable, int] = {}
        for idx, station in enumerate(station_list):
            if station.id in station_index:
                raise NetworkIntegrityError(f"Duplicate station id {station.id!r}")
            station_index[station.id] = idx

        self._validate_tracks(track_list, station_index)

        graph = TransitGraph(
            stations=station_list,
            tracks=track_list,
            station_index=station_index,
            adjacency=[[] for _ in station_list],
        )
        merged = 0
        for track in track_list:
            effective = graph.effective_capacity(track)
            if effective == 0:
                logger.debug("Track %s has zero effective capacity", track.id)
            u = station_index[track.start]
            v = station_index[track.end]
            if self._merge_into_existing(graph.adjacency[u], v, effective):
                merged += 1
                logger.debug("Merged parallel track %s into edge %s->%s", track.id, u, v)
            else:
                graph.adjacency[u].append(Edge(target=v, capacity=effective))

        logger.debug(
            "Built transit graph: %d stations, %d tracks, %d edges (%d parallel merges)",
            graph.num_stations,
            len(track_list),
            graph.edge_count,
            merged,
        )
        return graph

    @staticmethod
    def _validate_tracks(tracks: Sequence[Track], station_index: Dict[Hashable, int]) -> None:
        seen_ids = set()
        for track in tracks:
            if track.id in seen_ids:
                raise NetworkIntegrityError(f"Duplicate track id {track.id!r}")
            seen_ids.add(track.id)
            for endpoint in (track.start, track.end):
                if endpoint not in station_index:
                    raise NetworkIntegrityError(
                        f"Track {track.id!r} references unknown station {endpoint!r}"
                    )

    @staticmethod
    def _merge_into_existing(edges: List[Edge], target: int, capacity: int) -> bool:
        for edge in edges:
            if edge.target == target:
                if edge.capacity + capacity > MAX_CAPACITY:
                    raise NetworkIntegrityError(
                        f"Parallel tracks into station index {target} exceed the maximum capacity"
                    )
                edge.capacity += capacity
                return True
        return False


__all__ = ["GraphBuilder", "TransitGraph"]
