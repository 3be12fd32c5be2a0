"""Exceptions raised while building or querying a transit network."""

from __future__ import annotations


class UnknownStationError(KeyError):
    """Raised when a station id is not part of the constructed network."""

    def __init__(self, station_id: object) -> None:
        super().__init__(station_id)
        self.station_id = station_id

    def __str__(self) -> str:
        return f"Unknown station id {self.station_id!r}"


class NetworkIntegrityError(ValueError):
    """Raised when station/track records cannot form a consistent network."""


__all__ = ["NetworkIntegrityError", "UnknownStationError"]
