"""Core dataclasses shared across the network and planning packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

# Capacities are stored as int64 by the max-flow arena.
MAX_CAPACITY = 2**63 - 1


def _check_count(value: object, owner: str, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{owner} field '{field_name}' must be an integer, got {value!r}")
    if value > MAX_CAPACITY:
        raise ValueError(f"{owner} field '{field_name}' exceeds the maximum of {MAX_CAPACITY}")


@dataclass(frozen=True)
class Station:
    """A station (building) and the number of occupants it can hold or emit."""

    id: Hashable
    occupants: int

    def __post_init__(self) -> None:
        _check_count(self.occupants, f"Station {self.id!r}", "occupants")
        if self.occupants < 0:
            raise ValueError(f"Station {self.id!r} must have non-negative occupants")


@dataclass(frozen=True)
class Track:
    """Directed track between two stations with a declared capacity and cost."""

    id: Hashable
    start: Hashable
    end: Hashable
    capacity: int
    cost: int

    def __post_init__(self) -> None:
        owner = f"Track {self.id!r}"
        _check_count(self.capacity, owner, "capacity")
        _check_count(self.cost, owner, "cost")
        if self.capacity <= 0:
            raise ValueError(f"Track {self.id!r} must have a positive capacity")
        if self.cost <= 0:
            raise ValueError(f"Track {self.id!r} must have a positive cost")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.id}:{self.start}->{self.end}"


@dataclass
class Edge:
    """Outgoing edge of the adjacency graph; parallel tracks share one edge."""

    target: int
    capacity: int
