"""Command-line interface for Pairing Planner.

This module provides the ``pairing-planner`` command: offline schedule
generation and export, and running the HTTP API server.
"""

# Pairing Planner
# Copyright (C) 2025  Pairing Planner developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from dateutil.parser import isoparse

from pairingplanner import __version__
from pairingplanner.analysis import ScheduleStatistics
from pairingplanner.config import PlannerSettings
from pairingplanner.constants import APP_NAME, EXPORT_FORMATS
from pairingplanner.controllers.planner import SchedulePlanner
from pairingplanner.exceptions import (
    ConfigurationException,
    PairingPlannerException,
    ValidationException,
)
from pairingplanner.models.schedule import Schedule
from pairingplanner.utils import set_log_level, setup_logger

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

OUTPUT_FORMATS = ("text", "json") + EXPORT_FORMATS


def parse_start_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` start date.

    Raises:
        argparse.ArgumentTypeError: If the value is not an ISO date
    """
    try:
        return isoparse(value.strip()).date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid start date '{value}'. Use YYYY-MM-DD (e.g., '2025-03-01')"
        )


def parse_rounds(value: str) -> int:
    """Parse the number of rounds; range checks happen in the generator."""
    try:
        return int(value.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number of rounds '{value}'")


def read_players_file(path: Path) -> List[str]:
    """Read one player name per line; blank lines and ``#`` comments are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def format_schedule_text(schedule: Schedule, stats: ScheduleStatistics) -> str:
    """Human-readable rendering of a schedule and its key statistics."""
    lines = [
        f"Round robin: {len(schedule.roster)} players, "
        f"{schedule.number_of_rounds} rounds (cycle length {schedule.cycle_length})"
    ]

    for round_data in schedule.rounds:
        title = f"\nRound {round_data.round_number}"
        if round_data.round_date is not None:
            title += f" ({round_data.round_date.isoformat()})"
        lines.append(title + ":")
        for pairing in round_data.pairings:
            lines.append(f"  {pairing}")
        if round_data.bye_player is not None:
            lines.append(f"  Bye: {round_data.bye_player}")

    lines.append(
        f"\nPairings: {stats.total_pairings}, byes: {stats.total_byes}, "
        f"repeated pairs: {stats.repeated_pairs}, "
        f"balance spread: {stats.balance_spread}"
    )
    return "\n".join(lines)


def run_generate(args: argparse.Namespace, settings: PlannerSettings) -> int:
    """Generate a schedule and write it in the requested format."""
    players = list(args.players or [])
    if args.players_file:
        players.extend(read_players_file(args.players_file))

    planner = SchedulePlanner(settings=settings)
    schedule = planner.generate(players, args.rounds, start_date=args.start_date)

    if args.format in EXPORT_FORMATS:
        export = planner.download(args.format)
        if args.output and args.output.is_dir():
            export.save(args.output)
        elif args.output:
            _write(args.output, export.content)
        else:
            sys.stdout.buffer.write(export.content)
        return EXIT_OK

    if args.format == "json":
        payload = schedule.to_dict()
        payload["statistics"] = planner.statistics().to_dict()
        payload["playerUsage"] = {
            name: record.to_dict() for name, record in planner.player_usage().items()
        }
        text = json.dumps(payload, indent=2, ensure_ascii=False)
    else:
        text = format_schedule_text(schedule, planner.statistics())

    if args.output:
        _write(args.output, (text + "\n").encode("utf-8"))
    else:
        print(text)
    return EXIT_OK


def run_serve(args: argparse.Namespace, settings: PlannerSettings) -> int:
    """Run the HTTP API with uvicorn until interrupted."""
    import uvicorn

    from pairingplanner.api import create_app

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Starting %s API on %s:%d", APP_NAME, host, port)
    uvicorn.run(create_app(settings), host=host, port=port, log_level="info")
    return EXIT_OK


def _write(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    logger.info("Output written to: %s", path)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="pairing-planner",
        description=f"{APP_NAME}: round-robin pairings for a fixed roster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four players, three rounds, printed as text
  pairing-planner generate --players Anna Ben Clara Dan --rounds 3

  # Weekly rounds from a roster file, exported for Excel
  pairing-planner generate --players-file roster.txt --rounds 9 \\
      --start-date 2025-03-01 --format csv --output plan.csv

  # Serve the HTTP API
  pairing-planner serve --port 8080
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate a schedule")
    gen.add_argument("--players", nargs="+", metavar="NAME", help="Player names")
    gen.add_argument(
        "--players-file",
        type=Path,
        help="File with one player name per line",
    )
    gen.add_argument(
        "--rounds",
        type=parse_rounds,
        required=True,
        help="Number of rounds to schedule",
    )
    gen.add_argument(
        "--start-date",
        type=parse_start_date,
        help=(
            "Date of the first round (YYYY-MM-DD); later rounds follow every "
            "PAIRING_PLANNER_ROUND_INTERVAL_DAYS days (default 7)"
        ),
    )
    gen.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    gen.add_argument(
        "--output",
        type=Path,
        help="Output file, or directory for csv/xlsx (default: stdout)",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API server")
    serve.add_argument("--host", help="Interface to bind (default from settings)")
    serve.add_argument("--port", type=int, help="Port to listen on")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = PlannerSettings.from_env()
        set_log_level(logging.DEBUG if args.verbose else settings.log_level)
        if args.command == "generate":
            return run_generate(args, settings)
        return run_serve(args, settings)
    except (ValidationException, ConfigurationException) as e:
        logger.error("Invalid input: %s", e)
        return EXIT_INVALID_INPUT
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except PairingPlannerException as e:
        logger.error("Planning failed: %s", e, exc_info=True)
        return EXIT_FAILURE
    except Exception as e:
        logger.error("Unexpected error: %s", e, exc_info=True)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
