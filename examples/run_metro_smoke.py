from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

from metroplan.network.network_config import NetworkConfig
from metroplan.planning.metro_service import MetroService


SYNTH_NETWORK: Dict[str, List[object]] = {
    "stations": [
        {"id": "Central", "occupants": 120},
        {"id": "Harbour", "occupants": 60},
        {"id": "Museum", "occupants": 45},
        {"id": "Airport", "occupants": 200},
        {"id": "Depot", "occupants": 0},
    ],
    "tracks": [
        {"id": "C-H-1", "start": "Central", "end": "Harbour", "capacity": 40, "cost": 4},
        {"id": "C-H-2", "start": "Central", "end": "Harbour", "capacity": 30, "cost": 3},
        {"id": "C-M", "start": "Central", "end": "Museum", "capacity": 50, "cost": 5},
        {"id": "H-A", "start": "Harbour", "end": "Airport", "capacity": 80, "cost": 8},
        {"id": "M-A", "start": "Museum", "end": "Airport", "capacity": 35, "cost": 2},
        {"id": "A-D", "start": "Airport", "end": "Depot", "capacity": 10, "cost": 1},
    ],
    "passengers": ["alice", "ALBERT", "bob", "Beatrice", "carl"],
    "checker_schedules": [[6, 9], [8, 11], [9, 12], [12, 15], [13, 14]],
}


def _load_config(path: Optional[str]) -> NetworkConfig:
    if not path:
        logging.info("Using built-in synthetic metro network")
        return NetworkConfig.from_mapping(SYNTH_NETWORK)
    return NetworkConfig.from_yaml(path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the metroplan smoke test.")
    parser.add_argument("--network", help="Optional YAML file overriding the synthetic network")
    parser.add_argument("--source", default="Central")
    parser.add_argument("--sink", default="Airport")
    parser.add_argument("--prefix", default="al", help="Passenger name prefix to search for")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = _load_config(args.network)
    service = MetroService.from_config(config)

    print("=== Metro Planning Smoke Test ===")
    print(f"Stations: {service.graph.num_stations}, tracks: {len(service.graph.tracks)}")
    print(f"Max passengers {args.source} -> {args.sink}: {service.max_passengers(args.source, args.sink)}")
    for path, bottleneck in service.augmenting_paths(args.source, args.sink):
        print(f"  {' -> '.join(str(station) for station in path)} (+{bottleneck})")
    print("")
    print("Best network:")
    report = service.network_report()
    for row in report[report["selected"].astype(bool)].itertuples(index=False):
        print(f"  #{row.rank} {row.track_id}: {row.start} - {row.end} goodness={row.goodness}")
    print("")
    print(f"Passengers matching '{args.prefix}': {service.search_passengers(args.prefix)}")
    print(f"Ticket checkers: {service.hire_ticket_checkers(config.checker_schedules)}")


if __name__ == "__main__":
    main()
