from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

import pandas as pd
import yaml

from .domain_types import Station, Track

logger = logging.getLogger(__name__)

_STATION_COLUMNS = ["id", "occupants"]
_TRACK_COLUMNS = ["id", "start", "end", "capacity", "cost"]


def _require_int(raw: Mapping[str, object], key: str, label: str) -> int:
    """
    Read an integer field from a raw record.

    Args:
        raw: Mapping parsed from YAML or a CSV row.
        key: Field name.
        label: Human-readable record label for error messages.
    Returns:
        The value converted to ``int``.
    """
    value = raw.get(key)
    if value is None or (isinstance(value, float) and pd.isna(value)):
        raise ValueError(f"{label} is missing '{key}'")
    if isinstance(value, bool):
        raise TypeError(f"{label} field '{key}' must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"{label} field '{key}' must be an integer, got {value!r}") from exc
    if not number.is_integer():
        raise ValueError(f"{label} field '{key}' must be a whole number, got {value!r}")
    return int(number)


def _require_id(raw: Mapping[str, object], key: str, label: str) -> str:
    value = raw.get(key)
    if value is None or (isinstance(value, float) and pd.isna(value)):
        raise ValueError(f"{label} is missing '{key}'")
    text = str(value).strip()
    if not text:
        raise ValueError(f"{label} field '{key}' cannot be empty")
    return text


def _parse_station(raw: object, position: int) -> Station:
    if not isinstance(raw, Mapping):
        raise TypeError(f"Station entry #{position} must be a mapping")
    label = f"Station entry #{position}"
    return Station(id=_require_id(raw, "id", label), occupants=_require_int(raw, "occupants", label))


def _parse_track(raw: object, position: int) -> Track:
    if not isinstance(raw, Mapping):
        raise TypeError(f"Track entry #{position} must be a mapping")
    label = f"Track entry #{position}"
    return Track(
        id=_require_id(raw, "id", label),
        start=_require_id(raw, "start", label),
        end=_require_id(raw, "end", label),
        capacity=_require_int(raw, "capacity", label),
        cost=_require_int(raw, "cost", label),
    )


def _parse_schedule(raw: object, position: int) -> Tuple[int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise TypeError(f"Checker schedule #{position} must be a [start, end] pair")
    label = f"Checker schedule #{position}"
    start = _require_int({"start": raw[0]}, "start", label)
    end = _require_int({"end": raw[1]}, "end", label)
    return start, end


@dataclass
class NetworkConfig:
    """Station/track records plus the optional passenger and checker inputs."""

    stations: List[Station] = field(default_factory=list)
    tracks: List[Track] = field(default_factory=list)
    passengers: List[str] = field(default_factory=list)
    checker_schedules: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "NetworkConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Network YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, Mapping):
            raise TypeError("Network YAML must contain a mapping at the top level")
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "NetworkConfig":
        stations_raw = data.get("stations") or []
        tracks_raw = data.get("tracks") or []
        passengers_raw = data.get("passengers") or []
        schedules_raw = data.get("checker_schedules") or []
        for key, value in (
            ("stations", stations_raw),
            ("tracks", tracks_raw),
            ("passengers", passengers_raw),
            ("checker_schedules", schedules_raw),
        ):
            if not isinstance(value, list):
                raise TypeError(f"'{key}' must be provided as a list")

        stations = [_parse_station(raw, pos) for pos, raw in enumerate(stations_raw)]
        tracks = [_parse_track(raw, pos) for pos, raw in enumerate(tracks_raw)]
        for pos, name in enumerate(passengers_raw):
            if name is None:
                raise TypeError(f"Passenger entry #{pos} is null")
        passengers = [str(name).strip() for name in passengers_raw if str(name).strip()]
        if len(passengers) != len(passengers_raw):
            logger.warning("Ignored %d blank passenger names", len(passengers_raw) - len(passengers))
        schedules = [_parse_schedule(raw, pos) for pos, raw in enumerate(schedules_raw)]
        return cls(
            stations=stations,
            tracks=tracks,
            passengers=passengers,
            checker_schedules=schedules,
        )

    @classmethod
    def from_csv(cls, stations_path: str | Path, tracks_path: str | Path) -> "NetworkConfig":
        """Load stations (``id,occupants``) and tracks (``id,start,end,capacity,cost``)."""
        stations_df = _read_records_csv(stations_path, _STATION_COLUMNS, ["id"])
        tracks_df = _read_records_csv(tracks_path, _TRACK_COLUMNS, ["id", "start", "end"])
        stations = [
            _parse_station(row, pos)
            for pos, row in enumerate(stations_df.to_dict(orient="records"))
        ]
        tracks = [
            _parse_track(row, pos)
            for pos, row in enumerate(tracks_df.to_dict(orient="records"))
        ]
        logger.debug("Loaded %d stations and %d tracks from CSV", len(stations), len(tracks))
        return cls(stations=stations, tracks=tracks)

    def to_yaml(self, path: str | Path) -> None:
        output: Dict[str, object] = {
            "stations": [
                {"id": str(station.id), "occupants": int(station.occupants)}
                for station in self.stations
            ],
            "tracks": [
                {
                    "id": str(track.id),
                    "start": str(track.start),
                    "end": str(track.end),
                    "capacity": int(track.capacity),
                    "cost": int(track.cost),
                }
                for track in self.tracks
            ],
        }
        if self.passengers:
            output["passengers"] = list(self.passengers)
        if self.checker_schedules:
            output["checker_schedules"] = [[int(s), int(e)] for s, e in self.checker_schedules]
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        with dest.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(output, handle, sort_keys=False)


def _read_records_csv(
    path: str | Path, columns: Sequence[str], id_columns: Sequence[str]
) -> pd.DataFrame:
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found at {csv_path}")
    df = pd.read_csv(csv_path, dtype={col: str for col in id_columns})
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"{csv_path.name} is missing required columns: {', '.join(missing)}")
    return df[list(columns)]


__all__ = ["NetworkConfig"]
