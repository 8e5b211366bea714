#!/usr/bin/env python3
"""
Synthetic image generator for histogram benchmarks.

Writes a binary PGM (P5) of the requested size, one row at a time, so images
far larger than memory can be produced. Pixel values follow one of two
patterns: uniform random noise or a horizontal gradient.
"""

import argparse
import sys

import numpy as np

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB


def generate_row(
    row_idx: int,
    width: int,
    maxval: int,
    pattern: str,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Generate the pixel values of one image row.

    "random" draws uniformly from [0, maxval]. "gradient" ramps from 0 at the
    left edge to maxval at the right edge, shifted by one value per row.
    """
    if pattern == "random":
        return rng.integers(0, maxval + 1, size=width, dtype=np.uint8)

    ramp = np.arange(width, dtype=np.int64) * (maxval + 1) // max(width, 1)
    return ((ramp + row_idx) % (maxval + 1)).astype(np.uint8)


def generate_synthetic_pgm(
    output_path: str,
    width: int,
    height: int,
    maxval: int,
    pattern: str,
    seed: int,
) -> np.ndarray:
    """
    Write the image and return the expected histogram of its pixel data.

    The returned array can be compared against the tool's output.
    """
    rng = np.random.default_rng(seed)
    expected = np.zeros(maxval + 1, dtype=np.int64)

    with open(output_path, "wb", buffering=BUFFER_SIZE) as f:
        f.write(f"P5\n# synthetic {pattern} seed={seed}\n{width} {height}\n{maxval}\n".encode())

        for row_idx in range(height):
            row = generate_row(row_idx, width, maxval, pattern, rng)
            expected += np.bincount(row, minlength=maxval + 1)
            f.write(row.tobytes())

            # Progress indicator every 10000 rows
            if (row_idx + 1) % 10000 == 0:
                print(f"  Generated {row_idx + 1}/{height} rows...", file=sys.stderr)

    return expected


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic 8-bit PGM image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ~1 GB of random noise
  python generate_synthetic_pgm.py --out data/noise.pgm --width 32768 --height 32768

  # Gradient with a reduced value range, plus the expected histogram
  python generate_synthetic_pgm.py --out data/ramp.pgm --pattern gradient --maxval 63 \\
      --expected data/ramp_expected.csv
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--width",
        type=int,
        default=4096,
        help="Image width in pixels (default: 4096)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=4096,
        help="Image height in pixels (default: 4096)",
    )
    parser.add_argument(
        "--maxval",
        type=int,
        default=255,
        help="Maximum sample value, 1-255 (default: 255)",
    )
    parser.add_argument(
        "--pattern",
        choices=["random", "gradient"],
        default="random",
        help="Pixel pattern (default: random)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )
    parser.add_argument(
        "--expected",
        help="Optional path to write the expected value,count table",
    )

    args = parser.parse_args()

    # Validate
    if args.width < 0 or args.height < 0:
        parser.error("--width and --height must be non-negative")
    if not 1 <= args.maxval <= 255:
        parser.error("--maxval must be in [1, 255]")

    approx_size_mb = (args.width * args.height) / (1024 * 1024)

    print("=" * 60, file=sys.stderr)
    print("Synthetic PGM Generator", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Size: {args.width:,} x {args.height:,}", file=sys.stderr)
    print(f"Maxval: {args.maxval}", file=sys.stderr)
    print(f"Pattern: {args.pattern}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print(f"Estimated size: ~{approx_size_mb:.1f} MB", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(file=sys.stderr)

    print("Generating...", file=sys.stderr)
    expected = generate_synthetic_pgm(
        output_path=args.out,
        width=args.width,
        height=args.height,
        maxval=args.maxval,
        pattern=args.pattern,
        seed=args.seed,
    )

    if args.expected:
        with open(args.expected, "w", encoding="ascii", newline="\n") as f:
            for value, count in enumerate(expected.tolist()):
                f.write(f"{value},{count}\n")

    print(file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Done! Wrote {args.width * args.height:,} pixels to {args.out}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)


if __name__ == "__main__":
    main()
