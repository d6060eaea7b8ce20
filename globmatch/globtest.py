"""Command that matches a string against a glob pattern and optionally times it."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence

from .lexer import GlobError
from .pattern import compile_glob

_MIN_DURATION_NS = 200_000_000
_MAX_ROUNDS = 1 << 30


def _parse_separators(spec: str) -> list[str]:
    separators = []
    for piece in spec.split(","):
        if len(piece) > 1:
            raise GlobError("only single charactered separators are allowed")
        if piece:
            separators.append(piece)
    return separators


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _measure(func: Callable[[], object]) -> tuple[int, int]:
    """Call ``func`` in growing batches until a batch takes long enough.

    Returns the batch size and its duration in nanoseconds.
    """
    number = 1
    while True:
        start = time.perf_counter_ns()
        for _ in range(number):
            func()
        elapsed = time.perf_counter_ns() - start
        if elapsed >= _MIN_DURATION_NS or number >= _MAX_ROUNDS:
            return number, elapsed
        number *= 10


def _bench(func: Callable[[], object]) -> str:
    number, ns_total = _measure(func)
    ns_per_op = ns_total // number
    if ns_per_op < 10:
        ns = f"{ns_total / number:13.2f} ns/op"
    elif ns_per_op < 100:
        ns = f"{ns_total / number:12.1f} ns/op"
    else:
        ns = f"{ns_per_op:10d} ns/op"
    return f"{number:8d}\t{ns}"


def run(
    pattern: str,
    separators: str = "",
    fixture: str = "",
    verbose: bool = False,
) -> None:
    """Print whether ``fixture`` matches ``pattern``; with ``verbose`` also print timings.

    Raises GlobError for an empty or malformed pattern or bad separators.
    """
    if not pattern:
        raise GlobError("pattern must not be empty")
    seps = _parse_separators(separators)
    try:
        glob = compile_glob(pattern, *seps)
    except GlobError as exc:
        raise GlobError(f"could not compile pattern: {exc}") from exc
    result = glob.match(fixture)
    if not verbose:
        print(_flag(result))
        return
    print(f"result: {_flag(result)}")
    print("compile:", _bench(lambda: compile_glob(pattern, *seps)))
    print("match:    ", _bench(lambda: glob.match(fixture)))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and run; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="globtest", description="Match a string against a glob pattern."
    )
    parser.add_argument("-p", dest="pattern", default="", help="pattern to match")
    parser.add_argument("-s", dest="separators", default="", help="comma separated list of separators")
    parser.add_argument("-f", dest="fixture", default="", help="fixture")
    parser.add_argument("-v", dest="verbose", action="store_true", help="verbose")
    args = parser.parse_args(argv)
    try:
        run(args.pattern, args.separators, args.fixture, args.verbose)
    except GlobError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())