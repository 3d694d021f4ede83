"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and state directories into the test's tmp_path."""
    xdg = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(xdg / "state"))
    return xdg


@pytest.fixture
def homes(tmp_path: Path) -> Path:
    """Directory standing in for /home."""
    base = tmp_path / "home"
    base.mkdir()
    return base


@pytest.fixture
def alice_home(homes: Path) -> Path:
    """Home directory with a bash history and a hidden vim swap file."""
    home = homes / "alice"
    home.mkdir()
    (home / ".bash_history").write_bytes(b"ls -la\npwd")
    (home / ".viminfo.swp").write_bytes(b"")
    (home / ".bashrc").write_text("export EDITOR=vim\n")
    return home


@pytest.fixture
def bob_home(homes: Path) -> Path:
    """Home directory with zsh and python history plus an unrelated file."""
    home = homes / "bob"
    home.mkdir()
    (home / ".zsh_history").write_text(": 1700000000:0;git status\n")
    (home / ".python_history").write_text("import os\n")
    (home / "notes.txt").write_text("keep me\n")
    return home
