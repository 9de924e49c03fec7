#!/usr/bin/env python3
"""
Demo and benchmarks for lexrank enumerators.

Usage:
    python3 demo.py --family permutation -n 5 -r 3            # List 5P3
    python3 demo.py --family combination -n 7 -r 3 --start 3  # 7C3 from rank 3
    python3 demo.py --family multiset --frequency 3,2,1 -r 4  # Multiset permutations
    python3 demo.py --family circular-multiset --frequency 3,3,1 -r 3
    python3 demo.py --benchmark                               # successor() vs unrank()
"""

import argparse
import time

from lexrank import FAMILIES, MULTISET_FAMILIES, create_enumerator
from lexrank.logging import enable_debug_logging


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_count(n: int) -> str:
    """Format number with K/M suffix."""
    if n >= 1_000_000:
        return f"{n/1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n/1_000:.1f}K"
    return str(n)


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"


def format_arrangement(arrangement: tuple[int, ...]) -> str:
    """Format an arrangement as a bracketed list."""
    return "[" + ", ".join(str(s) for s in arrangement) + "]"


def parse_frequency(text: str) -> list[int]:
    """Parse a comma-separated frequency vector such as '3,2,1'."""
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid frequency vector: {text!r}") from exc


# =============================================================================
# Listing
# =============================================================================


def run_listing(family: str, shape, r: int, start: int, limit: int):
    """Print arrangements of a family starting at rank start."""
    enumerator = create_enumerator(family, shape, r)

    print("=" * 70)
    print(f"{enumerator!r}")
    print("=" * 70)
    print(f"  Total arrangements: {enumerator.total_count:>12}")

    if family == "circular-multiset":
        if start:
            print("  (sequential only: --start ignored)")
        rank = 0
    else:
        enumerator.jump_to(start)
        rank = enumerator.next_rank

    count = min(limit, enumerator.total_count)
    print(f"\n{'Arrangements':─^70}")
    for _ in range(count):
        arrangement = enumerator.successor()
        print(f"  {rank:>8}  {format_arrangement(arrangement)}")
        rank = (rank + 1) % enumerator.total_count


# =============================================================================
# Benchmark
# =============================================================================


BENCHMARK_CASES = [
    ("permutation", 10, 6),
    ("combination", 30, 6),
    ("circular", 10, 6),
    ("multiset", [3, 3, 2, 2, 1], 7),
]


def run_benchmark(num_steps: int):
    """Compare sequential successor() against direct unrank() per arrangement."""
    print("=" * 70)
    print("lexrank - successor() vs unrank()")
    print("=" * 70)
    print(f"  {'Family':<14}{'Total':>10}{'successor()':>16}{'unrank()':>16}")

    for family, shape, r in BENCHMARK_CASES:
        enumerator = create_enumerator(family, shape, r)
        steps = min(num_steps, enumerator.total_count)

        start = time.perf_counter()
        for _ in range(steps):
            enumerator.successor()
        successor_time = (time.perf_counter() - start) / steps

        start = time.perf_counter()
        for rank in range(steps):
            enumerator.unrank(rank)
        unrank_time = (time.perf_counter() - start) / steps

        print(
            f"  {family:<14}{format_count(enumerator.total_count):>10}"
            f"{format_time(successor_time):>16}{format_time(unrank_time):>16}"
        )


# =============================================================================
# Main
# =============================================================================


DEFAULT_N = 5
DEFAULT_R = 3
DEFAULT_LIMIT = 20
DEFAULT_STEPS = 2000


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Lexicographic enumeration demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --family permutation -n 5 -r 3
  python3 demo.py --family circular -n 6 -r 4 --limit 100
  python3 demo.py --family multiset --frequency 3,2,1 -r 4 --start 10
  python3 demo.py --benchmark
        """,
    )
    parser.add_argument("--family", choices=sorted(FAMILIES), help="Family to list")
    parser.add_argument("-n", type=int, default=DEFAULT_N, help=f"Alphabet size (default: {DEFAULT_N})")
    parser.add_argument("--frequency", type=parse_frequency, help="Multiplicities for multiset families, e.g. 3,2,1")
    parser.add_argument("-r", type=int, default=DEFAULT_R, help=f"Arrangement length (default: {DEFAULT_R})")
    parser.add_argument("--start", type=int, default=0, help="First rank to list (default: 0)")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help=f"Arrangements to list (default: {DEFAULT_LIMIT})")
    parser.add_argument("--benchmark", action="store_true", help="Benchmark successor() against unrank()")
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help=f"Benchmark steps per family (default: {DEFAULT_STEPS})")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        enable_debug_logging()

    if args.benchmark:
        run_benchmark(args.steps)
    elif args.family:
        if args.family in MULTISET_FAMILIES:
            if args.frequency is None:
                parser.error(f"--frequency is required for --family {args.family}")
            shape = args.frequency
        else:
            shape = args.n
        try:
            run_listing(args.family, shape, args.r, args.start, args.limit)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
