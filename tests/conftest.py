"""Shared fixtures: a throwaway assets directory and settings pointing at it."""

from pathlib import Path

import pytest

from tonightsmoon.config import Settings

EXCLAMATIONS = ["Look up!", "Oh my stars!", "Heads up!"]
QUOTES = ['"The moon is a friend." - Someone', '"Swear not by the moon." - Someone else']


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    (tmp_path / "exclamations.txt").write_text("\n".join(EXCLAMATIONS) + "\n", encoding="utf-8")
    (tmp_path / "quotes.txt").write_text("\n".join(QUOTES) + "\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(assets_dir: Path) -> Settings:
    return Settings(assets_dir=assets_dir)


@pytest.fixture
def exclamations() -> list[str]:
    return list(EXCLAMATIONS)


@pytest.fixture
def quotes() -> list[str]:
    return list(QUOTES)
