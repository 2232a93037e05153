"""Flavor text for the nightly report — random exclamations and quotes from line-per-entry assets."""

import logging
import random
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

EXCLAMATIONS_FILE = "exclamations.txt"
QUOTES_FILE = "quotes.txt"


class MissingAssetError(FileNotFoundError):
    """Flavor text asset file does not exist."""


def random_line(lines: Iterable[str], rng: random.Random | None = None) -> str | None:
    """Pick one line uniformly at random in a single pass (reservoir of size 1).

    The n-th line (0-based) replaces the current pick with probability 1/(n+1),
    so the sequence never needs to be held in memory or counted up front.

    Args:
        lines: Any iterable of lines, e.g. an open file or a list.
        rng: Random source. Defaults to the module-level generator.

    Returns:
        The chosen line, or None if lines is empty.
    """
    draw = rng.random if rng is not None else random.random
    chosen: str | None = None
    for number, line in enumerate(lines):
        if draw() < 1.0 / (number + 1):
            chosen = line
    return chosen


def random_line_of_file(path: Path, rng: random.Random | None = None) -> str | None:
    """Return a random line of the file at path, without its trailing newline.

    Raises:
        MissingAssetError: If path does not exist.
    """
    if not path.is_file():
        raise MissingAssetError(f"Asset not found: {path}")
    logger.debug("Sampling a line from %s", path)
    with path.open(encoding="utf-8") as f:
        line = random_line(f, rng)
    if line is None:
        logger.warning("Asset is empty: %s", path)
        return None
    return line.rstrip("\r\n")


def random_exclamation(assets_dir: Path, rng: random.Random | None = None) -> str | None:
    return random_line_of_file(assets_dir / EXCLAMATIONS_FILE, rng)


def random_quote(assets_dir: Path, rng: random.Random | None = None) -> str | None:
    return random_line_of_file(assets_dir / QUOTES_FILE, rng)
