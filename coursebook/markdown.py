"""Helpers for producing Markdown fragments: links, durations and tables."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import PurePath


def _is_prefix(prefix: PurePath, path: PurePath) -> bool:
    """Return True if ``prefix`` is a component-wise prefix of ``path``."""
    prefix_parts = prefix.parts
    return path.parts[: len(prefix_parts)] == prefix_parts


def relative_link(doc_path: str | os.PathLike[str], target_path: str | os.PathLike[str]) -> str:
    """Build a link to ``target_path`` relative to the document at ``doc_path``.

    Both paths are relative to the same source root.
    """
    doc = PurePath(doc_path)
    target_text = os.fspath(target_path)
    target = PurePath(target_text)

    dotdot = -1
    for ancestor in (doc, *doc.parents):
        if _is_prefix(ancestor, target):
            break
        dotdot += 1

    if dotdot > 0:
        return "../" * dotdot + target_text
    return f"./{target_text}"


def duration(minutes: int) -> str:
    """Describe a number of minutes in a human-readable way.

    Durations longer than five minutes are rounded up to the next multiple of
    five.
    """
    if minutes < 0:
        raise ValueError(f"duration cannot be negative: {minutes}")
    if minutes > 5:
        minutes += 4
        minutes -= minutes % 5

    hours, minutes = divmod(minutes, 60)
    if hours == 0:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if minutes == 0:
        return hour_text
    return f"{hour_text} and {minutes} minutes"


class Table:
    """A two-dimensional table rendered as GitHub-flavoured Markdown."""

    def __init__(self, header: Sequence[str]) -> None:
        self.header: tuple[str, ...] = tuple(header)
        self.rows: list[tuple[str, ...]] = []

    def add_row(self, row: Sequence[str]) -> None:
        """Append a row; it must have as many cells as the header."""
        cells = tuple(row)
        if len(cells) != len(self.header):
            raise ValueError(
                f"row has {len(cells)} cells but the table has {len(self.header)} columns"
            )
        self.rows.append(cells)

    @staticmethod
    def _format_row(cells: Iterable[str]) -> str:
        return "|" + "".join(f" {cell} |" for cell in cells) + "\n"

    def __str__(self) -> str:
        lines = [
            self._format_row(self.header),
            self._format_row("-" for _ in self.header),
        ]
        lines.extend(self._format_row(row) for row in self.rows)
        return "".join(lines)