# globmatch

Glob pattern matching for strings, with optional separator characters.
A pattern is compiled once into a tree of specialised matchers (prefix,
suffix, contains, fixed-width rows and so on), so repeated matching is cheap.
A match always covers the whole string.

## Pattern syntax

| Term          | Meaning                                                  |
|---------------|----------------------------------------------------------|
| `*`           | any sequence of non-separator characters                 |
| `**`          | any sequence of characters, separators included          |
| `?`           | any single non-separator character                       |
| `[abc]`       | one character from the list                              |
| `[!abc]`      | one character not in the list                            |
| `[a-z]`       | one character in the range                               |
| `[!a-z]`      | one character outside the range                          |
| `{a,b,c}`     | any of the comma-separated alternative patterns          |
| `\c`          | the character `c` itself                                 |

## Library use

```python
from globmatch.pattern import Glob, compile_glob, quote

g = compile_glob("*.github.com")
g.match("api.github.com")        # True

g = compile_glob(quote("*.github.com"))
g.match("*.github.com")          # True

# "." as a separator: "*" stops at dots, "**" does not
g = compile_glob("api.*.com", ".")
g.match("api.github.com")        # True
g.match("api.gi.hub.com")        # False

g = compile_glob("api.**.com", ".")
g.match("api.gi.hub.com")        # True

g = compile_glob("{cat,bat,[fr]at}")
g.match("rat")                   # True
g.match("frat")                  # False

# the class can be used directly; separators is any iterable of characters
g = Glob("a.?.c", ".")
g.match("a.b.c")                 # True
```

An invalid pattern raises `globmatch.lexer.GlobError` (a `ValueError`).

A `Glob` keeps its source pattern: `str(g)` returns it and `marshal_text()`
returns it as UTF-8 bytes. `unmarshal_text(data)` takes bytes or a string,
compiles it without separators and replaces the pattern; if compiling fails
the glob is left as it was. The compiled matcher is available as `g.matcher`.

`quote(s)` escapes every meta character (`*`, `?`, `\`, `[`, `]`, `{`, `}`)
with a backslash.

To see the matcher tree a pattern compiles to, render it as Graphviz DOT:

```python
from globmatch.graphviz import graphviz

g = compile_glob("*.github.com")
print(graphviz("*.github.com", g.matcher))
```

The lower layers can be used on their own: `globmatch.lexer.Lexer` yields
tokens, `globmatch.parser.parse` builds a `globmatch.ast.Node` tree, and
`globmatch.compiler.build_match` turns a tree into a matcher.

## Command line

Check a single string against a pattern; prints `true` or `false`:

```
globtest -p "*.github.com" -f api.github.com
globtest -p "api.*.com" -s . -f api.gi.hub.com
```

With `-v` it prints `result: true` or `result: false` followed by rough
timings for compiling the pattern and for matching.

Print the DOT graph of the compiled matcher for a pattern:

```
globdraw -p "{https://*.google.*,*yandex.*}" -s .
```

`globdraw -file patterns.txt` reads one pattern per line; `-offset N` skips
the first N lines. With `-auto`, each graph is rendered to
`glob.graphviz.png` with the external `dot` program, opened with the external
`open` command, and you are asked whether to go on to the next pattern.

For both commands `-s` takes a comma-separated list of single-character
separators. On an error they print `error: ...` to standard error and exit
with status 1.

## What it does not do

It matches strings only. It does not list directories or walk a file
system to find paths that match a pattern.