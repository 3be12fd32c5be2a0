from __future__ import annotations

import pytest

from metroplan.network.domain_types import Station, Track
from metroplan.network.errors import NetworkIntegrityError
from metroplan.network.network_config import NetworkConfig
from metroplan.planning.metro_service import MetroService


def _line_service() -> MetroService:
    stations = [Station("A", 5), Station("B", 5), Station("C", 0)]
    tracks = [
        Track("T1", "A", "B", capacity=10, cost=1),
        Track("T2", "B", "C", capacity=10, cost=1),
    ]
    return MetroService(tracks, stations)


def test_service_answers_both_planning_queries():
    service = _line_service()

    assert service.max_passengers("A", "B") == 5
    assert service.max_passengers("A", "C") == 0
    assert service.best_network() == ["T1", "T2"]


def test_service_construction_fails_on_unknown_station():
    with pytest.raises(NetworkIntegrityError):
        MetroService([Track("T1", "A", "X", capacity=1, cost=1)], [Station("A", 1)])


def test_service_accepts_missing_inputs():
    service = MetroService(None, None)
    assert service.best_network() == []
    assert service.graph.num_stations == 0


def test_network_report_ranks_and_flags_selection():
    service = MetroService(
        [
            Track("AB", "A", "B", capacity=10, cost=2),
            Track("BC", "B", "C", capacity=10, cost=2),
            Track("AC", "A", "C", capacity=50, cost=5),
        ],
        [Station("A", 100), Station("B", 100), Station("C", 100)],
    )

    report = service.network_report()

    assert list(report["track_id"]) == ["AC", "AB", "BC"]
    assert list(report["goodness"]) == [10, 5, 5]
    assert list(report["selected"]) == [True, True, False]
    assert list(report["rank"]) == [1, 2, 3]


def test_network_report_is_empty_for_trackless_network():
    report = MetroService([], [Station("A", 1)]).network_report()
    assert report.empty
    assert "goodness" in report.columns


def test_passenger_search_through_service():
    service = _line_service()
    service.add_passengers(["alice", "ALBERT", "bob"])
    service.add_passenger("Al")

    assert service.search_passengers("AL") == ["Al", "Alice", "Albert"]
    assert service.search_passengers("z") == []


def test_from_config_seeds_passengers():
    config = NetworkConfig(
        stations=[Station("A", 3), Station("B", 3)],
        tracks=[Track("T", "A", "B", capacity=2, cost=1)],
        passengers=["carol"],
    )
    service = MetroService.from_config(config)

    assert service.max_passengers("A", "B") == 2
    assert service.search_passengers("c") == ["Carol"]


def test_hire_ticket_checkers_is_static():
    assert MetroService.hire_ticket_checkers([(1, 3), (2, 5), (3, 6), (6, 8)]) == 3
