"""Planning package exports."""

from .max_flow import MaxFlowSolver, ResidualNetwork
from .spanning_tree import SpanningTreeSelector, track_goodness

__all__ = [
    "MaxFlowSolver",
    "MetroService",
    "ResidualNetwork",
    "SpanningTreeSelector",
    "track_goodness",
]


def __getattr__(name):
    if name == "MetroService":
        from .metro_service import MetroService

        return MetroService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
