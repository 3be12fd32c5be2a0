"""Network package exports."""

from .disjoint_set import DisjointSet
from .domain_types import Edge, Station, Track
from .errors import NetworkIntegrityError, UnknownStationError
from .graph_builder import GraphBuilder, TransitGraph
from .network_config import NetworkConfig

__all__ = [
    "DisjointSet",
    "Edge",
    "GraphBuilder",
    "NetworkConfig",
    "NetworkIntegrityError",
    "Station",
    "Track",
    "TransitGraph",
    "UnknownStationError",
]
