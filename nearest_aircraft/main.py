"""Command-line entry point: report the aircraft nearest to a coordinate read from stdin.

Usage:
    printf '36.12 N\\n86.67 W\\n' | python -m nearest_aircraft
    printf '36.12 N\\n86.67 W\\n' | python -m nearest_aircraft --top 5 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from nearest_aircraft.config import settings
from nearest_aircraft.domain.coordinates import parse_point
from nearest_aircraft.errors import InputError, NearestAircraftError, NoResultsError
from nearest_aircraft.ingestors.opensky import OpenSkyIngestor
from nearest_aircraft.services.ranking import NearestReport, find_nearest

logger = logging.getLogger("nearest_aircraft")


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"unknown logging level {raw!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nearest_aircraft",
        description=(
            "Read '<lat> <N|S>' and '<lon> <E|W>' lines from stdin and report the "
            "nearest aircraft currently tracked by the OpenSky Network."
        ),
    )
    parser.add_argument("--url", default=None, help="OpenSky states/all endpoint")
    parser.add_argument(
        "--timeout", type=float, default=None, help="Request timeout in seconds"
    )
    parser.add_argument(
        "--top", type=_positive_int, default=1, help="Number of nearest aircraft to report"
    )
    parser.add_argument(
        "--strict-hemispheres",
        action="store_true",
        default=settings.strict_hemispheres,
        help="Require N/S on the latitude line and E/W on the longitude line",
    )
    parser.add_argument(
        "--log-level", type=_log_level, default=settings.log_level, help="Logging level"
    )
    return parser


def _read_input(stdin: TextIO) -> str:
    try:
        return stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Failed to read input coords: {exc}") from exc


def _write_report(report: NearestReport, out: TextIO) -> None:
    out.write(f"Plane states with known coordinates: {report.located_count}\n")
    numbered = len(report.nearest) > 1
    for idx, result in enumerate(report.nearest, start=1):
        label = f"Result {idx}" if numbered else "Result"
        out.write(f"{label}: {result.state!r} with distance {result.distance_km} km.\n")


def run(
    args: argparse.Namespace,
    *,
    stdin: TextIO,
    stderr: TextIO,
    ingestor: OpenSkyIngestor | None = None,
) -> None:
    """Parse input, fetch states, rank them and write the report."""

    origin = parse_point(_read_input(stdin), strict_hemispheres=args.strict_hemispheres)

    ingestor = ingestor or OpenSkyIngestor(base_url=args.url, timeout=args.timeout)
    states = ingestor.get_states()

    report = find_nearest(origin, states, count=args.top)
    _write_report(report, stderr)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stderr: TextIO | None = None,
    ingestor: OpenSkyIngestor | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stderr = stderr or sys.stderr

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        stream=stderr,
    )

    try:
        run(args, stdin=stdin, stderr=stderr, ingestor=ingestor)
    except NoResultsError as exc:
        stderr.write("Plane states with known coordinates: 0\n")
        stderr.write(f"{exc}\n")
        return 1
    except NearestAircraftError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
