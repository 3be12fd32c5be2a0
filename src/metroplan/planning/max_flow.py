"""Maximum passenger throughput via shortest augmenting paths (Edmonds–Karp)."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

import numpy as np

from metroplan.network.graph_builder import TransitGraph

logger = logging.getLogger(__name__)


@dataclass
class ResidualNetwork:
    """Arc topology shared by every flow query over one transit graph.

    Each base edge ``u -> v`` owns an arc ``u -> v`` and is paired with an arc
    ``v -> u``. The paired arc is the declared ``v -> u`` edge when one exists,
    otherwise a reverse arc with zero base capacity. Queries copy only
    :attr:`base_capacity`; the topology is never mutated.
    """

    arc_target: List[int]
    arc_reverse: List[int]
    arcs_by_station: List[List[int]]
    base_capacity: np.ndarray

    @classmethod
    def from_graph(cls, graph: TransitGraph) -> "ResidualNetwork":
        arc_index: Dict[Tuple[int, int], int] = {}
        arc_target: List[int] = []
        arcs_by_station: List[List[int]] = [[] for _ in range(graph.num_stations)]
        capacities: List[int] = []

        def _arc(u: int, v: int) -> int:
            idx = arc_index.get((u, v))
            if idx is None:
                idx = len(arc_target)
                arc_index[(u, v)] = idx
                arc_target.append(v)
                arcs_by_station[u].append(idx)
                capacities.append(0)
            return idx

        forward: List[Tuple[int, int, int]] = []
        for u, edges in enumerate(graph.adjacency):
            for edge in edges:
                idx = _arc(u, edge.target)
                capacities[idx] = edge.capacity
                forward.append((idx, u, edge.target))

        reverse: Dict[int, int] = {}
        for idx, u, v in forward:
            rev = _arc(v, u)
            reverse[idx] = rev
            reverse[rev] = idx

        return cls(
            arc_target=arc_target,
            arc_reverse=[reverse[idx] for idx in range(len(arc_target))],
            arcs_by_station=arcs_by_station,
            base_capacity=np.asarray(capacities, dtype=np.int64),
        )

    @property
    def num_arcs(self) -> int:
        return len(self.arc_target)

    def fresh_capacities(self) -> List[int]:
        """Return a query-private copy of the residual capacities."""
        return self.base_capacity.tolist()


class MaxFlowSolver:
    """Answers max-flow queries over an immutable :class:`TransitGraph`."""

    def __init__(self, graph: TransitGraph) -> None:
        self.graph = graph
        self._network: Optional[ResidualNetwork] = None

    @property
    def network(self) -> ResidualNetwork:
        if self._network is None:
            self._network = ResidualNetwork.from_graph(self.graph)
        return self._network

    # ---------------------------------------------------------------------- API --
    def max_flow(self, source_id: Hashable, sink_id: Hashable) -> int:
        """Return the maximum number of passengers movable from source to sink.

        Zero-occupancy endpoints short-circuit to 0. When source and sink are
        the same station the answer is that station's self-loop capacity; the
        graph is left untouched, so repeating the query gives the same value.
        """
        source = self.graph.index_of(source_id)
        sink = self.graph.index_of(sink_id)
        if self._has_empty_endpoint(source, sink):
            return 0
        if source == sink:
            return self.graph.edge_capacity(source, source)

        total = 0
        augmentations = 0
        for _, bottleneck in self._augment(source, sink):
            total += bottleneck
            augmentations += 1
        logger.debug(
            "Max flow %r -> %r = %d after %d augmentations",
            source_id,
            sink_id,
            total,
            augmentations,
        )
        return total

    def augmenting_paths(
        self, source_id: Hashable, sink_id: Hashable
    ) -> Iterator[Tuple[List[Hashable], int]]:
        """Yield ``(station_ids, bottleneck)`` for every augmentation performed."""
        source = self.graph.index_of(source_id)
        sink = self.graph.index_of(sink_id)
        if self._has_empty_endpoint(source, sink) or source == sink:
            return
        stations = self.graph.stations
        for path, bottleneck in self._augment(source, sink):
            yield [stations[idx].id for idx in path], bottleneck

    # ----------------------------------------------------------------- internal --
    def _has_empty_endpoint(self, source: int, sink: int) -> bool:
        stations = self.graph.stations
        return stations[source].occupants == 0 or stations[sink].occupants == 0

    def _augment(self, source: int, sink: int) -> Iterator[Tuple[List[int], int]]:
        network = self.network
        residual = network.fresh_capacities()
        while True:
            arcs = self._bfs(network, residual, source, sink)
            if arcs is None:
                return
            bottleneck = min(residual[arc] for arc in arcs)
            for arc in arcs:
                residual[arc] -= bottleneck
                residual[network.arc_reverse[arc]] += bottleneck
            path = [source] + [network.arc_target[arc] for arc in arcs]
            yield path, bottleneck

    @staticmethod
    def _bfs(
        network: ResidualNetwork, residual: List[int], source: int, sink: int
    ) -> Optional[List[int]]:
        """Return the arcs of the first BFS path to ``sink`` or ``None``."""
        parent_arc = [-1] * len(network.arcs_by_station)
        visited = [False] * len(network.arcs_by_station)
        visited[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for arc in network.arcs_by_station[u]:
                v = network.arc_target[arc]
                if visited[v] or residual[arc] <= 0:
                    continue
                visited[v] = True
                parent_arc[v] = arc
                if v == sink:
                    return _walk_back(network, parent_arc, source, sink)
                queue.append(v)
        return None


def _walk_back(
    network: ResidualNetwork, parent_arc: List[int], source: int, sink: int
) -> List[int]:
    arcs: List[int] = []
    node = sink
    while node != source:
        arc = parent_arc[node]
        arcs.append(arc)
        node = network.arc_target[network.arc_reverse[arc]]
    arcs.reverse()
    return arcs


__all__ = ["MaxFlowSolver", "ResidualNetwork"]
