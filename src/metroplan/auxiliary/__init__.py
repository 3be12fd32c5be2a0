"""Standalone helpers hosted alongside the planning engine."""

from .interval_scheduling import hire_ticket_checkers, max_non_overlapping
from .passenger_directory import PassengerDirectory

__all__ = [
    "PassengerDirectory",
    "hire_ticket_checkers",
    "max_non_overlapping",
]
