import argparse
import sys
from typing import Sequence

from pakr_iec.config.config import get_config
from pakr_iec.errors import MagnitudeOutOfRangeError
from pakr_iec.human_iec import decimal, format_magnitude, iec
from pakr_iec.logger.create_logger import create_logger

EXIT_OK = 0
EXIT_OUT_OF_RANGE = 1


def magnitude(arg: str) -> int:
    """argparse type: int literal in any base Python accepts ("1_000", "0x400"), non-negative."""
    try:
        value = int(arg, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{arg!r} is not an integer")
    if value < 0:
        raise argparse.ArgumentTypeError(f"{arg!r} is negative")
    return value


def parse_args(argv: Sequence[str] | None = None, default_mode: str = "decimal"):
    parser = argparse.ArgumentParser(
        prog="pakr-iec",
        description="Format integers with decimal (1000 is 1.0k) or IEC (1024 is 1.0ki) suffixes.",
    )
    parser.add_argument(
        "values",
        type=magnitude,
        nargs="+",
        metavar="VALUE",
        help="Non-negative integer to format.",
    )
    parser.add_argument(
        "--mode",
        choices=["decimal", "iec"],
        default=default_mode,
        help="Multiplier base, 1000 for decimal and 1024 for iec (default: %(default)s).",
    )
    parser.add_argument(
        "--both",
        action="store_true",
        help='Print "VALUE<tab>DECIMAL<tab>IEC" for each value, ignores --mode.',
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    config = get_config()
    log = create_logger(
        log_file=config.LOG_FILE,
        logger_name=config.SERVICE_NAME,
        log_level=config.LOG_LEVEL,
    )
    args = parse_args(argv, default_mode=config.DEFAULT_MODE)

    exit_code = EXIT_OK
    for value in args.values:
        try:
            if args.both:
                line = f"{value}\t{decimal(value)}\t{iec(value)}"
            else:
                line = format_magnitude(value, args.mode)
        except MagnitudeOutOfRangeError as e:
            log.error("Magnitude out of range", exc_info=e, extra=dict(value=value))
            exit_code = EXIT_OUT_OF_RANGE
            continue
        log.debug("Formatted", extra=dict(value=value, mode=args.mode, line=line))
        print(line)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
