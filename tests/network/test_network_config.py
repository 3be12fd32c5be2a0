from __future__ import annotations

import textwrap

import pytest

from metroplan.network.domain_types import Station, Track
from metroplan.network.network_config import NetworkConfig


def test_network_config_roundtrip(tmp_path):
    yaml_text = textwrap.dedent(
        """
        stations:
          - {id: A, occupants: 5}
          - {id: B, occupants: 5}
          - {id: C, occupants: 0}
        tracks:
          - {id: T1, start: A, end: B, capacity: 10, cost: 1}
          - {id: T2, start: B, end: C, capacity: 10, cost: 1}
        passengers: [alice, Bob]
        checker_schedules:
          - [0, 3]
          - [3, 5]
        """
    ).strip()
    config_path = tmp_path / "network.yaml"
    config_path.write_text(yaml_text, encoding="utf-8")

    config = NetworkConfig.from_yaml(config_path)

    assert config.stations == [Station("A", 5), Station("B", 5), Station("C", 0)]
    assert config.tracks[1] == Track("T2", "B", "C", capacity=10, cost=1)
    assert config.passengers == ["alice", "Bob"]
    assert config.checker_schedules == [(0, 3), (3, 5)]

    roundtrip_path = tmp_path / "out" / "roundtrip.yaml"
    config.to_yaml(roundtrip_path)
    roundtrip = NetworkConfig.from_yaml(roundtrip_path)
    assert roundtrip == config


def test_numeric_ids_are_read_as_strings(tmp_path):
    config_path = tmp_path / "network.yaml"
    config_path.write_text(
        "stations:\n  - {id: 1, occupants: 2}\n  - {id: 2, occupants: 2}\n"
        "tracks:\n  - {id: 10, start: 1, end: 2, capacity: 1, cost: 1}\n",
        encoding="utf-8",
    )
    config = NetworkConfig.from_yaml(config_path)

    assert config.stations[0].id == "1"
    assert config.tracks[0].start == "1"


def test_network_config_rejects_missing_fields(tmp_path):
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text(
        "stations:\n  - {id: A}\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="occupants"):
        NetworkConfig.from_yaml(config_path)


def test_network_config_rejects_non_mapping_and_missing_file(tmp_path):
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(TypeError):
        NetworkConfig.from_yaml(config_path)
    with pytest.raises(FileNotFoundError):
        NetworkConfig.from_yaml(tmp_path / "missing.yaml")


def test_network_config_rejects_fractional_capacity():
    with pytest.raises(ValueError, match="whole number"):
        NetworkConfig.from_mapping(
            {
                "stations": [{"id": "A", "occupants": 1}, {"id": "B", "occupants": 1}],
                "tracks": [{"id": "T", "start": "A", "end": "B", "capacity": 1.5, "cost": 1}],
            }
        )


def test_network_config_from_csv(tmp_path):
    stations_csv = tmp_path / "stations.csv"
    tracks_csv = tmp_path / "tracks.csv"
    stations_csv.write_text("id,occupants\nA,100\nB,100\n", encoding="utf-8")
    tracks_csv.write_text(
        "id,start,end,capacity,cost\nT1,A,B,3,1\nT2,A,B,4,2\n",
        encoding="utf-8",
    )

    config = NetworkConfig.from_csv(stations_csv, tracks_csv)

    assert config.stations == [Station("A", 100), Station("B", 100)]
    assert config.tracks == [
        Track("T1", "A", "B", capacity=3, cost=1),
        Track("T2", "A", "B", capacity=4, cost=2),
    ]


def test_network_config_csv_requires_columns(tmp_path):
    stations_csv = tmp_path / "stations.csv"
    tracks_csv = tmp_path / "tracks.csv"
    stations_csv.write_text("id,occupants\nA,1\n", encoding="utf-8")
    tracks_csv.write_text("id,start,end,capacity\nT1,A,A,3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="cost"):
        NetworkConfig.from_csv(stations_csv, tracks_csv)


def test_large_integers_keep_their_exact_value(tmp_path):
    config_path = tmp_path / "network.yaml"
    config_path.write_text(
        "stations:\n  - {id: A, occupants: 9007199254740993}\n"
        "tracks:\n  - {id: T1, start: A, end: A, capacity: 9007199254740993, cost: 1}\n",
        encoding="utf-8",
    )
    config = NetworkConfig.from_yaml(config_path)

    assert config.stations[0].occupants == 9007199254740993
    assert config.tracks[0].capacity == 9007199254740993


def test_large_csv_integers_keep_their_exact_value(tmp_path):
    stations_csv = tmp_path / "stations.csv"
    tracks_csv = tmp_path / "tracks.csv"
    stations_csv.write_text("id,occupants\nA,9007199254740993\n", encoding="utf-8")
    tracks_csv.write_text("id,start,end,capacity,cost\nT1,A,A,3,1\n", encoding="utf-8")

    config = NetworkConfig.from_csv(stations_csv, tracks_csv)

    assert config.stations[0].occupants == 9007199254740993
    assert type(config.stations[0].occupants) is int


def test_null_passenger_entry_is_rejected(tmp_path):
    config_path = tmp_path / "network.yaml"
    config_path.write_text("passengers: [alice, null]\n", encoding="utf-8")

    with pytest.raises(TypeError, match="Passenger entry #1"):
        NetworkConfig.from_yaml(config_path)
