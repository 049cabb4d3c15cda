"""Root finding for a fixed cubic polynomial with the secant method."""

from __future__ import annotations

import argparse
import math
import sys
import time
from concurrent.futures import ThreadPoolExecutor

DEFAULT_TOLERANCE = 1e-8
INTERVALS = ((-50.0, 50.0), (-100.0, 100.0), (-200.0, 200.0))


def function_value(x):
    """Evaluate 10x^3 - 3x^2 - 11x - 11 at ``x``."""
    return 10 * x**3 - 3 * x**2 - 11 * x - 11.0


def secant_method(sec1, sec2, tolerance=DEFAULT_TOLERANCE):
    """Iterate the secant method from ``sec1`` and ``sec2`` until the two
    most recent points lie within ``tolerance`` of each other.

    Returns the latest approximation of a root.
    """
    if math.isnan(tolerance) or tolerance < 0:
        raise ValueError(f"tolerance must be a non-negative number, got {tolerance!r}")
    while True:
        if not (math.isfinite(sec1) and math.isfinite(sec2)):
            raise ValueError("secant iteration reached a non-finite value")
        if abs(sec2 - sec1) <= tolerance:
            return sec2
        f1 = function_value(sec1)
        f2 = function_value(sec2)
        denominator = f1 - f2
        if denominator == 0:
            raise ZeroDivisionError("secant is horizontal; cannot take another step")
        sec1, sec2 = sec2, sec1 - f1 * (sec1 - sec2) / denominator


def _find_all_roots():
    return [secant_method(start, end) for start, end in INTERVALS]


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv=None):
    """Find the root of the polynomial from each starting interval and report timing."""
    parser = argparse.ArgumentParser(
        description="Approximate a root of 10x^3-3x^2-11x-11 with the secant method."
    )
    parser.add_argument(
        "--threads",
        type=_positive_int,
        default=1,
        help="number of workers that each run every interval (default: 1)",
    )
    args = parser.parse_args(argv)

    print(
        "Hello masodszor, parhuzamositani fogom a szelomodszert "
        "a 10x^3-3x^2-11x-11 fuggvenyre tobb intervallumon."
    )

    start = time.process_time()
    try:
        with ThreadPoolExecutor(max_workers=args.threads) as pool:
            futures = [pool.submit(_find_all_roots) for _ in range(args.threads)]
            results = [future.result() for future in futures]
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for roots in results:
        for root in roots:
            print(f"Megvannak a gyokok a szelo modszerrel: {root:.9f}")
    elapsed = time.process_time() - start

    print(f"Ossz futasi ido: {elapsed:.9f} msp")
    return 0


if __name__ == "__main__":
    sys.exit(main())