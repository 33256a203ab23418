"""Tests for command records and the keyword index."""

from __future__ import annotations

from cmdpick.command import Command, Commands


def test_index_contains_every_command_keyword(catalog):
    for cmd in catalog.commands:
        for kw in cmd.keywords:
            assert cmd in catalog.commands_for(kw)


def test_index_has_nothing_unjustified(catalog):
    for kw, cmds in catalog.items():
        for cmd in cmds:
            assert kw in cmd.keywords


def test_commands_keep_input_order(catalog, nix_env, nix_store, shutdown):
    assert catalog.commands == (nix_env, nix_store, shutdown)
    assert list(catalog) == [nix_env, nix_store, shutdown]
    assert len(catalog) == 3


def test_shared_keyword_accumulates(catalog, nix_env, nix_store):
    assert catalog.commands_for("nix") == {nix_env, nix_store}


def test_duplicate_keyword_in_one_command_is_idempotent():
    cmd = Command.from_strings("ls", None, ["files", "files"])
    catalog = Commands([cmd])
    assert catalog.commands_for("files") == {cmd}
    assert catalog.keywords == ["files"]


def test_has_keyword(catalog):
    assert catalog.has_keyword("nix")
    assert catalog.has_keyword("shutdown")
    assert not catalog.has_keyword("ni")
    assert not catalog.has_keyword("")


def test_keywords_are_sorted(catalog):
    assert catalog.keywords == ["nix", "search", "shutdown", "store"]


def test_unknown_keyword_has_no_commands(catalog):
    assert catalog.commands_for("docker") == frozenset()


def test_index_copy_does_not_leak(catalog):
    index = catalog.index
    index.pop("nix")
    assert catalog.has_keyword("nix")


def test_commands_sort_by_template_text(nix_env, nix_store, shutdown):
    assert sorted([shutdown, nix_env, nix_store]) == [nix_store, nix_env, shutdown]


def test_equality_uses_the_whole_record():
    a = Command.from_strings("ls", "list", ["files"])
    b = Command.from_strings("ls", "list", ["files"])
    c = Command.from_strings("ls", "other", ["files"])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_cmd_and_description(nix_store):
    assert nix_store.cmd == "du -sh /nix/store"
    assert Command.from_strings("ls").some_description == ""
