"""Command-line interface for the PGM histogram tool."""

import argparse
import logging
import sys

from pgm_histogram.engine import main_compute
from pgm_histogram.errors import HeaderError, SpanReadError, UnsupportedDepthError
from pgm_histogram.partition import CHUNK_SIZE

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def parse_thread_count(raw: str) -> int:
    """Parse the thread count, clamping unparsable or non-positive values to 1."""
    try:
        count = int(raw)
    except ValueError:
        logger.warning("Unparsable thread count %r, using 1", raw)
        return 1
    if count < 1:
        logger.warning("Non-positive thread count %d, using 1", count)
        return 1
    return count


def positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pgm-histogram",
        description="Compute the pixel-value histogram of an 8-bit binary PGM image.",
    )

    parser.add_argument("image_path", help="Path to the input image (binary PGM, P5)")
    parser.add_argument("output_path", help="Path of the value,count table to write")
    parser.add_argument(
        "thread_count",
        help="Number of worker threads (values below 1 are clamped to 1)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any worker cannot read its whole span instead of undercounting",
    )

    parser.add_argument(
        "--chunk-size",
        type=positive_int,
        default=CHUNK_SIZE,
        help=f"Bytes per read call in each worker (default: {CHUNK_SIZE})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    thread_count = parse_thread_count(args.thread_count)

    try:
        main_compute(
            image_path=args.image_path,
            output_path=args.output_path,
            worker_count=thread_count,
            strict=args.strict,
            chunk_size=args.chunk_size,
        )
    except HeaderError as exc:
        logger.error("Invalid PGM header: %s", exc)
        return 1
    except UnsupportedDepthError as exc:
        logger.error("%s", exc)
        return 1
    except SpanReadError as exc:
        logger.error("Incomplete read in strict mode: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Cannot write %s: %s", args.output_path, exc.strerror or exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
