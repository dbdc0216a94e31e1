"""Shared pytest fixtures: small word lists and config files on tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from policy import CONFIG_ENV

ROOT = Path(__file__).resolve().parent.parent

SMALL_WORDLIST = ["dumm", "scheiße", "bad_word", "porno"]


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Never let a developer's $UPPASSN_CONFIG leak into a test."""
    monkeypatch.delenv(CONFIG_ENV, raising=False)


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("# test list\n" + "\n".join(SMALL_WORDLIST) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path, wordlist_file: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        f"wordlist: {wordlist_file.name}\n"
        "matching:\n"
        "  max_distance: 2\n"
        "  max_length_delta: 2\n",
        encoding="utf-8",
    )
    return path
