"""Kruskal-style selection of the best-value track network."""

from __future__ import annotations

import logging
from typing import Hashable, List, Tuple

from metroplan.network.disjoint_set import DisjointSet
from metroplan.network.domain_types import Track
from metroplan.network.graph_builder import TransitGraph

logger = logging.getLogger(__name__)


def track_goodness(graph: TransitGraph, track: Track) -> int:
    """Effective capacity divided by cost, rounded down."""
    return graph.effective_capacity(track) // track.cost


class SpanningTreeSelector:
    """Greedy spanning-tree selection ranked by track goodness."""

    def __init__(self, graph: TransitGraph) -> None:
        self.graph = graph

    def ranked_tracks(self) -> List[Track]:
        """Tracks ordered by goodness desc, cost asc, declared capacity desc."""
        return sorted(self.graph.tracks, key=self._sort_key)

    def best_network(self) -> List[Hashable]:
        """Return the ids of the selected tracks in acceptance order.

        On a disconnected network the result is a spanning forest with fewer
        than ``num_stations - 1`` tracks.
        """
        target = self.graph.num_stations - 1
        selected: List[Hashable] = []
        if target <= 0:
            return selected

        components: DisjointSet[Hashable] = DisjointSet(
            station.id for station in self.graph.stations
        )
        for track in self.ranked_tracks():
            if components.connected(track.start, track.end):
                continue
            selected.append(track.id)
            components.union(track.start, track.end)
            if len(selected) == target:
                break

        if len(selected) < target:
            logger.warning(
                "Network is disconnected: selected %d of %d tracks (%d components)",
                len(selected),
                target,
                components.component_count,
            )
        else:
            logger.debug("Selected spanning tree with %d tracks", len(selected))
        return selected

    def _sort_key(self, track: Track) -> Tuple[int, int, int]:
        return (-track_goodness(self.graph, track), track.cost, -track.capacity)


__all__ = ["SpanningTreeSelector", "track_goodness"]
