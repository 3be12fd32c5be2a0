"""High-level API that bundles the planning engine with its auxiliary helpers.

This module provides :class:`MetroService`, the single entry point used by the
command line and by library callers. It builds a :class:`TransitGraph` once and
answers the two planning questions over it:

1. **max_passengers(start, end)**: the largest number of passengers that can
   travel from ``start`` to ``end`` when every track is capped by its declared
   capacity and by the occupants of both stations it joins.
2. **best_network()**: the ids of the tracks forming a spanning tree (or forest
   on a disconnected network) chosen greedily by goodness, i.e.
   ``effective_capacity // cost``, ties broken by lower cost and then higher
   declared capacity.

The service also hosts a passenger directory with case-insensitive prefix
search and the ticket-checker interval scheduler. Neither touches the graph.

Example Usage
-------------

.. code-block:: python

    from metroplan.network.domain_types import Station, Track
    from metroplan.planning.metro_service import MetroService

    stations = [Station("A", 5), Station("B", 5), Station("C", 0)]
    tracks = [Track("T1", "A", "B", capacity=10, cost=1),
              Track("T2", "B", "C", capacity=10, cost=1)]
    service = MetroService(tracks, stations)
    service.max_passengers("A", "B")   # 5
    service.best_network()             # ["T1", "T2"]

Notes
-----
- Construction fails with :class:`NetworkIntegrityError` when a track names an
  unknown station; no partially built service is returned.
- Queries never mutate the graph, so they are repeatable and independent.
"""

from __future__ import annotations

import logging
from typing import Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from metroplan.auxiliary.interval_scheduling import Interval, hire_ticket_checkers
from metroplan.auxiliary.passenger_directory import PassengerDirectory
from metroplan.network.domain_types import Station, Track
from metroplan.network.graph_builder import GraphBuilder, TransitGraph
from metroplan.network.network_config import NetworkConfig

from .max_flow import MaxFlowSolver
from .spanning_tree import SpanningTreeSelector, track_goodness

logger = logging.getLogger(__name__)


class MetroService:
    """Transit planning facade over an immutable station/track network."""

    def __init__(
        self,
        tracks: Optional[Sequence[Track]],
        stations: Optional[Sequence[Station]],
        *,
        builder: GraphBuilder | None = None,
    ) -> None:
        self._graph = (builder or GraphBuilder()).build(stations, tracks)
        self._flow_solver = MaxFlowSolver(self._graph)
        self._tree_selector = SpanningTreeSelector(self._graph)
        self._directory = PassengerDirectory()

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "MetroService":
        service = cls(config.tracks, config.stations)
        service.add_passengers(config.passengers)
        logger.debug("Seeded passenger directory with %d names", len(config.passengers))
        return service

    @property
    def graph(self) -> TransitGraph:
        return self._graph

    # ---------------------------------------------------------------- planning --
    def max_passengers(self, start: Hashable, end: Hashable) -> int:
        return self._flow_solver.max_flow(start, end)

    def augmenting_paths(
        self, start: Hashable, end: Hashable
    ) -> Iterator[Tuple[List[Hashable], int]]:
        return self._flow_solver.augmenting_paths(start, end)

    def best_network(self) -> List[Hashable]:
        return self._tree_selector.best_network()

    def network_report(self) -> pd.DataFrame:
        """Tidy per-track table in ranking order, flagging the selected tracks."""
        selected = set(self.best_network())
        rows = []
        for rank, track in enumerate(self._tree_selector.ranked_tracks(), start=1):
            rows.append(
                {
                    "rank": rank,
                    "track_id": track.id,
                    "start": track.start,
                    "end": track.end,
                    "capacity": track.capacity,
                    "cost": track.cost,
                    "effective_capacity": self._graph.effective_capacity(track),
                    "goodness": track_goodness(self._graph, track),
                    "selected": track.id in selected,
                }
            )
        return pd.DataFrame(
            rows,
            columns=[
                "rank",
                "track_id",
                "start",
                "end",
                "capacity",
                "cost",
                "effective_capacity",
                "goodness",
                "selected",
            ],
        )

    # -------------------------------------------------------------- passengers --
    def add_passenger(self, name: str) -> None:
        self._directory.insert(name)

    def add_passengers(self, names: Iterable[str]) -> None:
        for name in names:
            self.add_passenger(name)

    def search_passengers(self, prefix: str) -> List[str]:
        return self._directory.prefix_search(prefix)

    # ---------------------------------------------------------------- checkers --
    @staticmethod
    def hire_ticket_checkers(schedules: Iterable[Interval]) -> int:
        return hire_ticket_checkers(schedules)


__all__ = ["MetroService"]
