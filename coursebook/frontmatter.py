"""Parsing of YAML frontmatter at the top of chapters."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

from coursebook.book import Chapter

_FRONTMATTER = re.compile(
    r"\A\s*---[ \t]*\r?\n(?:(?P<yaml>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


class FrontmatterError(ValueError):
    """Raised when a chapter's frontmatter cannot be parsed."""


@dataclass
class Frontmatter:
    """Course annotations found in a chapter's frontmatter."""

    minutes: int | None = None
    target_minutes: int | None = None
    course: str | None = None
    session: str | None = None


def _as_count(key: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key!r} must be a non-negative integer, not {value!r}")
    return value


def _as_name(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"{key!r} must be a string, not {value!r}")
    return str(value)


def _parse(text: str) -> Frontmatter:
    data = yaml.safe_load(text) if text else None
    if data is None:
        return Frontmatter()
    if not isinstance(data, dict):
        raise ValueError("frontmatter must be a mapping")
    return Frontmatter(
        minutes=_as_count("minutes", data.get("minutes")),
        target_minutes=_as_count("target_minutes", data.get("target_minutes")),
        course=_as_name("course", data.get("course")),
        session=_as_name("session", data.get("session")),
    )


def split_frontmatter(chapter: Chapter) -> tuple[Frontmatter, str]:
    """Split a chapter's content into its frontmatter and the remaining text."""
    match = _FRONTMATTER.match(chapter.content)
    if match is None:
        return Frontmatter(), chapter.content
    try:
        frontmatter = _parse(match.group("yaml") or "")
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterError(
            f"error parsing frontmatter in {chapter.source_path!r}: {exc}"
        ) from exc
    return frontmatter, chapter.content[match.end():]