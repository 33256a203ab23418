"""Tests for {placeholder} template parsing and interpolation."""

from __future__ import annotations

import pytest

from cmdpick.errors import TemplateParseError
from cmdpick.template import Template, parse


def _rebuild(t: Template) -> str:
    out = t.chunks[0]
    for name, chunk in zip(t.names, t.chunks[1:]):
        out += "{" + name + "}" + chunk
    return out


def test_parse_mixed_placeholders():
    t = parse("nix-env -q '.*{}.*'{name} blabla")
    assert t.chunks == ("nix-env -q '.*", ".*'", " blabla")
    assert t.names == ("", "name")
    assert t.original == "nix-env -q '.*{}.*'{name} blabla"


def test_interpolate_values():
    t = parse("nix-env -q '.*{}.*'{name} blabla")
    assert t.interpolate(["stuff", "more-stuff"]) == "nix-env -q '.*stuff.*'more-stuff blabla"


def test_interpolate_missing_values_are_empty():
    t = parse("a{x}b{y}c")
    assert t.interpolate(["1"]) == "a1bc"
    assert t.interpolate([]) == "abc"


def test_interpolate_ignores_extra_values():
    t = parse("echo {msg}")
    assert t.interpolate(["hi", "ignored"]) == "echo hi"


def test_no_placeholder():
    t = parse("du -sh /nix/store")
    assert t.chunks == ("du -sh /nix/store",)
    assert t.names == ()
    assert not t.has_placeholders
    assert t.interpolate([]) == "du -sh /nix/store"


def test_empty_string():
    t = parse("")
    assert t.chunks == ("",)
    assert t.names == ()


def test_trailing_placeholder_leaves_empty_chunk():
    t = parse("ssh {host}")
    assert t.chunks == ("ssh ", "")
    assert t.names == ("host",)


def test_unterminated_brace_is_literal():
    t = parse("echo {oops")
    assert t.chunks == ("echo {oops",)
    assert t.names == ()


def test_unterminated_brace_after_placeholder():
    t = parse("{a} and {b")
    assert t.chunks == ("", " and {b")
    assert t.names == ("a",)


@pytest.mark.parametrize("s", [
    "",
    "plain",
    "{}",
    "x{}y{}z",
    "nix-env -q '.*{}.*'{name} blabla",
    "awk '{print $1}' {file}",
])
def test_chunks_and_names_rebuild_original(s):
    t = parse(s)
    assert len(t.chunks) == len(t.names) + 1
    assert _rebuild(t) == s
    assert str(t) == s


def test_non_string_is_rejected():
    with pytest.raises(TemplateParseError):
        parse(42)  # type: ignore[arg-type]


def test_templates_are_hashable_values():
    assert parse("a{b}") == parse("a{b}")
    assert len({parse("a{b}"), parse("a{b}")}) == 1
