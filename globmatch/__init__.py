"""Glob pattern compilation and matching.

The main entry points are in ``globmatch.pattern`` (``Glob``,
``compile_glob``, ``quote``); ``globmatch.graphviz`` renders compiled
matchers, and ``globmatch.globtest`` and ``globmatch.globdraw`` hold the
command-line tools.
"""

__version__ = "0.1.0"