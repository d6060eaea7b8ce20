"""Command that renders compiled glob patterns as Graphviz digraphs."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Sequence

from .graphviz import graphviz
from .lexer import GlobError
from .pattern import compile_glob

_IMAGE = "glob.graphviz.png"


def _parse_separators(spec: str) -> list[str]:
    separators = []
    for piece in spec.split(","):
        if len(piece) > 1:
            raise GlobError(f"only single charactered separators are allowed: {piece!r}")
        if piece:
            separators.append(piece)
    return separators


def _read_patterns(filepath: str, offset: int) -> list[str]:
    try:
        with open(filepath, encoding="utf-8") as file:
            lines = [line.removesuffix("\n").removesuffix("\r") for line in file]
    except OSError as exc:
        raise OSError(f"could not open {filepath}: {exc}") from exc
    patterns = []
    for line in lines:
        print(offset)
        if offset > 0:
            offset -= 1
            print("skipped")
            continue
        patterns.append(line)
    return patterns


def _open_image(dot_source: str) -> None:
    with open(_IMAGE, "wb") as image:
        subprocess.run(
            ["dot", "-Tpng"], input=dot_source.encode("utf-8"), stdout=image, check=True
        )
        image.flush()
        os.fsync(image.fileno())
    subprocess.run(["open", _IMAGE], check=True)


def _want_next() -> bool:
    print("cancel? [Y/n]: ", end="", flush=True)
    line = sys.stdin.readline()
    if not line.endswith("\n"):
        return False
    return not line.startswith("Y")


def run(
    pattern: str = "",
    separators: str = "",
    filepath: str = "",
    auto: bool = False,
    offset: int = 0,
) -> None:
    """Print (or, with ``auto``, render and open) the digraph of each pattern.

    Raises GlobError for bad separators or patterns and OSError for an unreadable file.
    """
    patterns = [pattern] if pattern else []
    if filepath:
        patterns.extend(_read_patterns(filepath, offset))
    if not patterns:
        return
    seps = _parse_separators(separators) if separators else []
    for p in patterns:
        try:
            glob = compile_glob(p, *seps)
        except GlobError as exc:
            raise GlobError(f"could not compile pattern {p!r}: {exc}") from exc
        dot_source = graphviz(p, glob.matcher)
        if not auto:
            print(dot_source)
            continue
        print(f"pattern: {p!r}: ", end="")
        try:
            _open_image(dot_source)
        except (OSError, subprocess.SubprocessError) as exc:
            print(f"could not open graphviz: {exc}", end="")
            raise SystemExit(1) from exc
        if not _want_next():
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and run; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="globdraw", description="Draw compiled glob patterns as Graphviz digraphs."
    )
    parser.add_argument("-p", dest="pattern", default="", help="pattern to draw")
    parser.add_argument(
        "-s", dest="separators", default="", help="comma separated list of separators characters"
    )
    parser.add_argument("-file", "--file", dest="filepath", default="", help="path for patterns file")
    parser.add_argument("-auto", "--auto", dest="auto", action="store_true", help="autoopen result")
    parser.add_argument("-offset", "--offset", dest="offset", type=int, default=0, help="patterns to skip")
    args = parser.parse_args(argv)
    try:
        run(args.pattern, args.separators, args.filepath, args.auto, args.offset)
    except (GlobError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())