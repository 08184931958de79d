"""
Command-line entry point for since.

Thin wrapper around the engine - no calculations here. The clock is sampled
once per invocation and handed to everything that needs it.
"""

import argparse
import logging
import sys

from since.formatters import get_epoch_output, get_output
from since.instant import CivilInstant
from since.parsers import ParseError, parse
from since.units import TOTAL_UNITS, Unit, coerce_unit

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace with ``unit`` and ``dates`` resolved
    """
    units = ", ".join(TOTAL_UNITS)
    parser = argparse.ArgumentParser(
        prog="since",
        description="Show the time elapsed between two dates, or since a date.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Units:
  {units}

Examples:
  %(prog)s 2018-12-24                  time since Christmas 2018
  %(prog)s days 2018-12-24             ...in whole days
  %(prog)s "24 Dec 2018 15:30" 2019-01-01T00:00
  %(prog)s seconds                     seconds since 1970-01-01

Arguments starting with a dash are always read as dates.
        """,
    )

    parser.add_argument(
        "values",
        nargs="*",
        metavar="ARG",
        help="Optional UNIT, then up to two dates, times or datetimes: FROM and TO",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing decisions to stderr",
    )

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_dates_after_flags(argv))

    args.unit, args.dates = split_values(args.values)
    if len(args.dates) > 2:
        parser.error(f"expected at most two dates, got {len(args.dates)}")

    return args


_FLAGS = frozenset({"-h", "--help", "-v", "--verbose"})


def _dates_after_flags(argv: list[str]) -> list[str]:
    """Move everything that isn't a known flag behind "--".

    Dates such as "-1-24-24" start with a dash; they must reach the date
    parser instead of being rejected as unknown options.
    """
    flags: list[str] = []
    values: list[str] = []
    rest = iter(argv)
    for arg in rest:
        if arg == "--":
            values.extend(rest)
            break
        (flags if arg in _FLAGS else values).append(arg)
    return flags + ["--"] + values


def split_values(values: list[str]) -> tuple[Unit, list[str]]:
    """Separate a leading unit name from the date arguments."""
    if values:
        try:
            return coerce_unit(values[0]), values[1:]
        except ValueError:
            pass
    return "auto", list(values)


def run(dates: list[str], now: CivilInstant, unit: Unit = "auto") -> str:
    """
    Resolve the date arguments against ``now`` and compute the output.

    No dates means "since the epoch", one date means "since then", two dates
    mean "between them".

    Raises:
        ParseError: If a date argument can't be parsed
    """
    if not dates:
        return get_epoch_output(now, unit)

    start = parse(dates[0], now)
    end = parse(dates[1], now) if len(dates) > 1 else now
    logger.debug("Comparing %s to %s in %s", start, end, unit)
    return get_output(start, end, unit)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Prints the result to stdout, or a parse error to stderr and exits with
    status 1.
    """
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    now = CivilInstant.now()

    try:
        output = run(args.dates, now, args.unit)
    except ParseError as e:
        print(f"{e}.", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
