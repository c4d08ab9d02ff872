"""Command-line entry point for the vector math showcase.

Evaluates one calculation mode for a pointer position and reports the
resulting vector:
- Text mode (default): result logged line by line
- JSON mode: result printed as a JSON document on stdout
"""

import argparse
import json
import logging
import sys

from vecmath.exceptions import VecMathError
from vecmath.math_utils import Vector2
from vecmath.showcase import CalculationType, default_mid, evaluate

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 40


def report(frame) -> None:
    """Log a showcase frame in human-readable form."""
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("MODE: %s", frame.calc_type.value.upper())
    logger.info("=" * SEPARATOR_WIDTH)
    for line in frame.description.splitlines():
        logger.info(line)
    logger.info("")
    logger.info("mid    = (%.4f, %.4f)", frame.mid.x, frame.mid.y)
    logger.info("offset = (%.4f, %.4f)", frame.offset.x, frame.offset.y)
    logger.info("tip    = (%.4f, %.4f)", frame.tip.x, frame.tip.y)
    for name, value in frame.measurements.items():
        logger.info("%s = %.4f", name, value)
    for start, end in frame.guides:
        logger.info("guide (%.1f, %.1f) -> (%.1f, %.1f)", start.x, start.y, end.x, end.y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="2D Vector Math Showcase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rotate the pointer offset by 45 degrees
  python main.py --mode rotate --pointer 700 300

  # Reflect over the horizontal line through a custom midpoint, as JSON
  python main.py --mode reflect --pointer 10 20 --mid 0 0 --json

  # List the available modes
  python main.py --list-modes
        """,
    )

    parser.add_argument(
        "--mode",
        type=str,
        default=CalculationType.NONE.value,
        help="Calculation mode to evaluate (default: none)",
    )

    parser.add_argument(
        "--pointer",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Pointer position (default: the midpoint)",
    )

    parser.add_argument(
        "--mid",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Anchor point (default: centre of the 1200x700 canvas)",
    )

    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    parser.add_argument("--list-modes", action="store_true", help="List calculation modes and exit")

    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv=None) -> int:
    """Parse command-line arguments and evaluate the requested mode.

    Returns:
        Process exit code: 0 on success, 1 on invalid input
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_modes:
        for calc_type in CalculationType:
            print(calc_type.value)
        return 0

    mid = Vector2(*args.mid) if args.mid else default_mid()
    pointer = Vector2(*args.pointer) if args.pointer else mid.copy()

    try:
        calc_type = CalculationType.from_name(args.mode)
        frame = evaluate(calc_type, pointer, mid)
    except (VecMathError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1

    if args.json:
        print(json.dumps(frame.to_dict(), indent=2))
    else:
        report(frame)
    return 0


if __name__ == "__main__":
    sys.exit(main())
