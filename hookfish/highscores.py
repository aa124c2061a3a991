"""High-score tables stored as whitespace-separated ``name score`` lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

MAX_ENTRIES = 5
MAX_NAME_LENGTH = 18

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ScoreEntry:
    """One line of a high-score table."""

    name: str
    score: int


class NameTooLongError(ValueError):
    """The player name is longer than the table allows."""


class InvalidNameError(ValueError):
    """The player name holds characters other than letters, digits and '_'."""


def _read_entries(path: PathLike) -> list[ScoreEntry]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    words = text.split()
    entries = []
    for name, score in zip(words[0::2], words[1::2]):
        if not _INTEGER_PATTERN.fullmatch(score):
            break
        entries.append(ScoreEntry(name, int(score)))
    return entries


def _write_entries(path: PathLike, entries: list[ScoreEntry]) -> None:
    with open(path, "w", encoding="utf-8") as out:
        for entry in entries:
            out.write(f"{entry.name} {entry.score}\n")


def _ranked(entries: list[ScoreEntry]) -> list[ScoreEntry]:
    return sorted(entries, key=lambda entry: entry.score, reverse=True)


def load_scores(path: PathLike) -> list[ScoreEntry]:
    """Read a table, best score first.

    A missing file gives an empty table. When the file holds more than five
    entries, the lowest one is dropped and the file is rewritten.
    """
    entries = _ranked(_read_entries(path))
    if len(entries) > MAX_ENTRIES:
        entries.pop()
        _write_entries(path, entries)
    return entries


def is_high_score(path: PathLike, new_score: int) -> bool:
    """Whether ``new_score`` beats the lowest score in the table."""
    entries = load_scores(path)
    if not entries:
        return True
    return new_score > entries[-1].score


def _validate_name(player_name: str) -> None:
    if len(player_name) > MAX_NAME_LENGTH:
        raise NameTooLongError(
            f"player name must be at most {MAX_NAME_LENGTH} characters"
        )
    for char in player_name:
        if not (char == "_" or (char.isascii() and char.isalnum())):
            raise InvalidNameError(
                "player name may hold only letters, digits and underscores"
            )


def add_high_score(path: PathLike, player_name: str, new_score: int) -> bool:
    """Enter ``new_score`` into the table if it beats the lowest entry.

    Returns True when the table was changed and written back.
    """
    _validate_name(player_name)
    entries = load_scores(path)
    if entries and new_score <= entries[-1].score:
        return False
    entries.append(ScoreEntry(player_name, new_score))
    entries = _ranked(entries)
    if len(entries) > MAX_ENTRIES:
        entries.pop()
    _write_entries(path, entries)
    return True


def ordinal(index: int) -> str:
    """The place label for a zero-based table position."""
    labels = {0: "1st", 1: "2nd", 2: "3rd"}
    return labels.get(index, f"{index + 1}th")