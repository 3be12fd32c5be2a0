"""CLI that answers throughput and network-selection queries for a metro network."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.console import Console
from rich.table import Table

from metroplan.network.errors import NetworkIntegrityError, UnknownStationError
from metroplan.network.network_config import NetworkConfig
from metroplan.planning.metro_service import MetroService

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--network",
        required=False,
        default=None,
        help="YAML file listing stations, tracks and optional passengers/checker schedules.",
    )
    parser.add_argument(
        "--stations-csv",
        default=None,
        help="Stations CSV (id,occupants). Use together with --tracks-csv instead of --network.",
    )
    parser.add_argument(
        "--tracks-csv",
        default=None,
        help="Tracks CSV (id,start,end,capacity,cost).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity for the CLI logger.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    flow = subparsers.add_parser("max-flow", help="Maximum passengers from source to sink.")
    flow.add_argument("--source", required=True, help="Source station id.")
    flow.add_argument("--sink", required=True, help="Sink station id.")
    flow.add_argument(
        "--show-paths",
        action="store_true",
        help="Also list every augmenting path with its bottleneck.",
    )

    subparsers.add_parser("best-network", help="Goodness-ranked spanning tree of tracks.")

    search = subparsers.add_parser("search", help="Prefix search over the passenger list.")
    search.add_argument("--prefix", required=True, help="Case-insensitive name prefix.")

    subparsers.add_parser("checkers", help="Ticket checkers needed for the listed schedules.")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def load_config(args: argparse.Namespace) -> NetworkConfig:
    if args.network:
        logger.info("Loading network from %s", args.network)
        return NetworkConfig.from_yaml(args.network)
    if args.stations_csv and args.tracks_csv:
        logger.info("Loading stations from %s and tracks from %s", args.stations_csv, args.tracks_csv)
        return NetworkConfig.from_csv(args.stations_csv, args.tracks_csv)
    raise SystemExit("Provide --network or both --stations-csv and --tracks-csv.")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    console = Console()

    try:
        config = load_config(args)
        service = MetroService.from_config(config)
    except (FileNotFoundError, NetworkIntegrityError, TypeError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    logger.info(
        "Network ready: %d stations, %d tracks",
        service.graph.num_stations,
        len(service.graph.tracks),
    )

    try:
        if args.command == "max-flow":
            _run_max_flow(console, service, args.source, args.sink, args.show_paths)
        elif args.command == "best-network":
            _run_best_network(console, service)
        elif args.command == "search":
            _run_search(console, service, args.prefix)
        elif args.command == "checkers":
            count = service.hire_ticket_checkers(config.checker_schedules)
            console.print(f"Ticket checkers: {count}")
    except UnknownStationError as exc:
        raise SystemExit(str(exc)) from exc


def _run_max_flow(
    console: Console, service: MetroService, source: str, sink: str, show_paths: bool
) -> None:
    flow = service.max_passengers(source, sink)
    console.print(f"Max passengers {source} -> {sink}: {flow}")
    if not show_paths:
        return
    table = Table(title="Augmenting paths")
    table.add_column("#", justify="right")
    table.add_column("Path")
    table.add_column("Bottleneck", justify="right")
    solver_paths = service.augmenting_paths(source, sink)
    for number, (path, bottleneck) in enumerate(solver_paths, start=1):
        table.add_row(str(number), " -> ".join(str(station) for station in path), str(bottleneck))
    console.print(table)


def _run_best_network(console: Console, service: MetroService) -> None:
    report = service.network_report()
    selected = report[report["selected"].astype(bool)]
    table = Table(title=f"Best network ({len(selected)} tracks)")
    for column in ("rank", "track_id", "start", "end", "effective_capacity", "cost", "goodness"):
        table.add_column(column, justify="right" if column != "track_id" else "left")
    for row in selected.itertuples(index=False):
        table.add_row(
            str(row.rank),
            str(row.track_id),
            str(row.start),
            str(row.end),
            str(row.effective_capacity),
            str(row.cost),
            str(row.goodness),
        )
    console.print(table)
    console.print("Selected tracks: " + ", ".join(str(track_id) for track_id in selected["track_id"]))


def _run_search(console: Console, service: MetroService, prefix: str) -> None:
    matches = service.search_passengers(prefix)
    if not matches:
        console.print(f"No passengers match '{prefix}'")
        return
    for name in matches:
        console.print(name)


if __name__ == "__main__":
    main()
