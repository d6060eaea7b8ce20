import pytest

from globmatch.lexer import GlobError
from globmatch.pattern import Glob, compile_glob, quote

pattern_all = "[a-z][!a-x]*cat*[h][!b]*eyes*"
fixture_all_match = "my cat has very bright eyes"
fixture_all_mismatch = "my dog has very bright eyes"
pattern_plain = "google.com"
fixture_plain_match = "google.com"
fixture_plain_mismatch = "example.com"
pattern_multiple = "https://*.google.*"
fixture_multiple_match = "https://account.google.com"
fixture_multiple_mismatch = "https://google.com"
pattern_alternatives = "{https://*.google.*,*yandex.*,*yahoo.*,*mail.ru}"
fixture_alternatives_match = "http://yahoo.com"
fixture_alternatives_mismatch = "http://google.com"
pattern_alternatives_suffix = "{https://*example.com,http://exclude.example.com}"
fixture_alternatives_suffix_first_match = "https://safe.example.com"
fixture_alternatives_suffix_first_mismatch = "http://safe.example.com"
fixture_alternatives_suffix_second = "http://exclude.example.com"
pattern_prefix = "abc*"
pattern_suffix = "*def"
pattern_prefix_suffix = "ab*ef"
fixture_prefix_suffix_match = "abcdef"
fixture_prefix_suffix_mismatch = "af"
pattern_alternatives_combine_lite = "{abc*def,abc?def,abc[zte]def}"
fixture_alternatives_combine_lite = "abczdef"
pattern_alternatives_combine_hard = "{abc*[a-c]def,abc?[d-g]def,abc[zte]?def}"
fixture_alternatives_combine_hard = "abczqdef"


def g(exp, pattern, fixture, *seps):
    return pytest.param(exp, pattern, fixture, seps, id=f"{pattern!r}-{fixture!r}-{''.join(seps)}")


COMPILE_CASES = [
    g(True, "* ?at * eyes", "my cat has very bright eyes"),
    g(True, "", ""),
    g(False, "", "b"),
    g(True, "*ä", "åä"),
    g(True, "abc", "abc"),
    g(True, "a*c", "abc"),
    g(True, "a*c", "a12345c"),
    g(True, "a?c", "a1c"),
    g(True, "a.b", "a.b", "."),
    g(True, "a.*", "a.b", "."),
    g(True, "a.**", "a.b.c", "."),
    g(True, "a.?.c", "a.b.c", "."),
    g(True, "a.?.?", "a.b.c", "."),
    g(True, "?at", "cat"),
    g(True, "?at", "fat"),
    g(True, "*", "abc"),
    g(True, "\\*", "*"),
    g(True, "**", "a.b.c", "."),
    g(False, "?at", "at"),
    g(False, "?at", "fat", "f"),
    g(False, "a.*", "a.b.c", "."),
    g(False, "a.?.c", "a.bb.c", "."),
    g(False, "*", "a.b.c", "."),
    g(True, "*test", "this is a test"),
    g(True, "this*", "this is a test"),
    g(True, "*is *", "this is a test"),
    g(True, "*is*a*", "this is a test"),
    g(True, "**test**", "this is a test"),
    g(True, "**is**a***test*", "this is a test"),
    g(False, "*is", "this is a test"),
    g(False, "*no*", "this is a test"),
    g(True, "[!a]*", "this is a test3"),
    g(True, "*abc", "abcabc"),
    g(True, "**abc", "abcabc"),
    g(True, "???", "abc"),
    g(True, "?*?", "abc"),
    g(True, "?*?", "ac"),
    g(False, "sta", "stagnation"),
    g(True, "sta*", "stagnation"),
    g(False, "sta?", "stagnation"),
    g(False, "sta?n", "stagnation"),
    g(True, "{abc,def}ghi", "defghi"),
    g(True, "{abc,abcd}a", "abcda"),
    g(True, "{a,ab}{bc,f}", "abc"),
    g(True, "{*,**}{a,b}", "ab"),
    g(False, "{*,**}{a,b}", "ac"),
    g(True, "/{rate,[a-z][a-z][a-z]}*", "/rate"),
    g(True, "/{rate,[0-9][0-9][0-9]}*", "/rate"),
    g(True, "/{rate,[a-z][a-z][a-z]}*", "/usd"),
    g(True, "{*.google.*,*.yandex.*}", "www.google.com", "."),
    g(True, "{*.google.*,*.yandex.*}", "www.yandex.com", "."),
    g(False, "{*.google.*,*.yandex.*}", "yandex.com", "."),
    g(False, "{*.google.*,*.yandex.*}", "google.com", "."),
    g(True, "{*.google.*,yandex.*}", "www.google.com", "."),
    g(True, "{*.google.*,yandex.*}", "yandex.com", "."),
    g(False, "{*.google.*,yandex.*}", "www.yandex.com", "."),
    g(False, "{*.google.*,yandex.*}", "google.com", "."),
    g(True, "*//{,*.}example.com", "https://www.example.com"),
    g(True, "*//{,*.}example.com", "http://example.com"),
    g(False, "*//{,*.}example.com", "http://example.com.net"),
    g(True, "{a*,b}c", "abc", "."),
    g(True, pattern_all, fixture_all_match),
    g(False, pattern_all, fixture_all_mismatch),
    g(True, pattern_plain, fixture_plain_match),
    g(False, pattern_plain, fixture_plain_mismatch),
    g(True, pattern_multiple, fixture_multiple_match),
    g(False, pattern_multiple, fixture_multiple_mismatch),
    g(True, pattern_alternatives, fixture_alternatives_match),
    g(False, pattern_alternatives, fixture_alternatives_mismatch),
    g(True, pattern_alternatives_suffix, fixture_alternatives_suffix_first_match),
    g(False, pattern_alternatives_suffix, fixture_alternatives_suffix_first_mismatch),
    g(True, pattern_alternatives_suffix, fixture_alternatives_suffix_second),
    g(True, pattern_alternatives_combine_hard, fixture_alternatives_combine_hard),
    g(True, pattern_alternatives_combine_lite, fixture_alternatives_combine_lite),
    g(True, pattern_prefix, fixture_prefix_suffix_match),
    g(False, pattern_prefix, fixture_prefix_suffix_mismatch),
    g(True, pattern_suffix, fixture_prefix_suffix_match),
    g(False, pattern_suffix, fixture_prefix_suffix_mismatch),
    g(True, pattern_prefix_suffix, fixture_prefix_suffix_match),
    g(False, pattern_prefix_suffix, fixture_prefix_suffix_mismatch),
]


@pytest.mark.parametrize("exp, pattern, fixture, seps", COMPILE_CASES)
def test_compile(exp, pattern, fixture, seps):
    assert compile_glob(pattern, *seps).match(fixture) is exp
    if not seps:
        glob = Glob()
        glob.unmarshal_text(pattern.encode("utf-8"))
        assert glob.match(fixture) is exp


@pytest.mark.parametrize(
    "pattern, fixture",
    [("{*,**,?}", "a.b"), ("{*.google.*,yandex.*}", "yandex.com")],
)
def test_compile_separators(pattern, fixture):
    glob = compile_glob(pattern, ".")
    assert str(glob) == pattern
    assert glob.match(fixture) is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[foo*]", "\\[foo\\*\\]"),
        ("{foo*}", "\\{foo\\*\\}"),
        ("*?\\[]{}", "\\*\\?\\\\\\[\\]\\{\\}"),
        ("some text and *?\\[]{}", "some text and \\*\\?\\\\\\[\\]\\{\\}"),
    ],
)
def test_quote(text, expected):
    quoted = quote(text)
    assert quoted == expected
    assert compile_glob(quoted).match(text) is True


EXAMPLES = [
    ("*.github.com", (), "<suffix:.github.com>", {"api.github.com": True}),
    (quote("*.github.com"), (), "<text:`*.github.com`>", {"*.github.com": True}),
    (
        "api.*.com",
        (".",),
        "<btree:[<nothing><-<text:`api.`>-><btree:[<any:![.]><-<text:`.com`>-><nothing>]>]>",
        {"api.github.com": True, "api.gi.hub.com": False},
    ),
    (
        "api.**.com",
        (".",),
        "<prefix_suffix:[api.,.com]>",
        {"api.github.com": True, "api.gi.hub.com": True},
    ),
    ("?at", (), "<row_3:[<single> <text:`at`>]>", {"cat": True, "fat": True, "at": False}),
    (
        "?at",
        ("f",),
        "<row_3:[<single:![f]> <text:`at`>]>",
        {"cat": True, "fat": False, "at": False},
    ),
    (
        "[abc]at",
        (),
        "<row_3:[<list:[abc]> <text:`at`>]>",
        {"cat": True, "bat": True, "fat": False, "at": False},
    ),
    (
        "[!abc]at",
        (),
        "<row_3:[<list:![abc]> <text:`at`>]>",
        {"cat": False, "bat": False, "fat": True, "at": False},
    ),
    (
        "[a-c]at",
        (),
        "<row_3:[<range:[a,c]> <text:`at`>]>",
        {"cat": True, "bat": True, "fat": False, "at": False},
    ),
    (
        "[!a-c]at",
        (),
        "<row_3:[<range:![a,c]> <text:`at`>]>",
        {"cat": False, "bat": False, "fat": True, "at": False},
    ),
    (
        "{cat,bat,[fr]at}",
        (),
        "<indexed_any_of:[[<text:`cat`> <text:`bat`> <row_3:[<list:[fr]> <text:`at`>]>]]>",
        {
            "cat": True,
            "bat": True,
            "fat": True,
            "rat": True,
            "at": False,
            "zat": False,
            "frat": False,
        },
    ),
]


@pytest.mark.parametrize("pattern, seps, description, results", EXAMPLES)
def test_examples(pattern, seps, description, results):
    glob = compile_glob(pattern, *seps)
    assert str(glob.matcher) == description
    assert {s: glob.match(s) for s in results} == results


def test_marshal_round_trip():
    glob = compile_glob("a*{b,c}")
    data = glob.marshal_text()
    assert data == b"a*{b,c}"
    other = Glob()
    other.unmarshal_text(data)
    assert str(other) == "a*{b,c}"
    assert other.match("xyz") is False
    assert other.match("axyc") is True


def test_unmarshal_failure_keeps_state():
    glob = compile_glob("abc")
    with pytest.raises(GlobError):
        glob.unmarshal_text(b"[abc")
    assert str(glob) == "abc"
    assert glob.match("abc") is True


@pytest.mark.parametrize("pattern", ["[", "[abc", "[z-a]", "[]"])
def test_compile_errors(pattern):
    with pytest.raises(GlobError):
        compile_glob(pattern)


def test_empty_glob_matches_only_empty():
    glob = Glob()
    assert glob.match("") is True
    assert glob.match("x") is False