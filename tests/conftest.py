"""Shared fixtures: the three-command catalog used throughout the tests."""

from __future__ import annotations

import pytest

from cmdpick.command import Command, Commands


@pytest.fixture
def nix_env() -> Command:
    return Command.from_strings("nix-env -q '.*{}.*'", "Search a Nix package by name", ["nix", "search"])


@pytest.fixture
def nix_store() -> Command:
    return Command.from_strings("du -sh /nix/store", "Show the size of the Nix store", ["nix", "store"])


@pytest.fixture
def shutdown() -> Command:
    return Command.from_strings("sudo shutdown -h now", "Shut the system down", ["shutdown"])


@pytest.fixture
def catalog(nix_env, nix_store, shutdown) -> Commands:
    return Commands([nix_env, nix_store, shutdown])


CATALOG_TOML = """
prompt = "$ "

[[commands]]
cmd = "nix-env -q '.*{}.*'"
description = "Search a Nix package by name"
keywords = ["nix", "search"]

[[commands]]
cmd = "du -sh /nix/store"
description = "Show the size of the Nix store"
keywords = ["nix", "store"]

[[commands]]
cmd = "sudo shutdown -h now"
description = "Shut the system down"
keywords = ["shutdown"]
"""


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.toml"
    path.write_text(CATALOG_TOML, encoding="utf-8")
    return path
