"""The book structure exchanged with mdBook as JSON."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO, Any, Union


@dataclass
class Separator:
    """A separator line between book items."""


@dataclass
class PartTitle:
    """A part title grouping the chapters that follow it."""

    title: str


@dataclass
class Chapter:
    """A single chapter of the book, possibly with nested sub-items."""

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[BookItem] = field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    _KNOWN = ("name", "content", "number", "sub_items", "path", "source_path", "parent_names")

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Chapter:
        """Build a chapter from its JSON object (the value under ``"Chapter"``)."""
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise ValueError(f"invalid chapter: {data!r}")
        sub_items = data.get("sub_items") or []
        if not isinstance(sub_items, list):
            raise ValueError(f"chapter {data['name']!r} has invalid sub_items")
        return cls(
            name=data["name"],
            content=data.get("content") or "",
            number=data.get("number"),
            sub_items=[_item_from_json(item) for item in sub_items],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names") or []),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this chapter."""
        return {
            "name": self.name,
            "content": self.content,
            "number": self.number,
            "sub_items": [_item_to_json(item) for item in self.sub_items],
            "path": self.path,
            "source_path": self.source_path,
            "parent_names": list(self.parent_names),
            **self.extra,
        }


BookItem = Union[Chapter, Separator, PartTitle]


def _item_from_json(data: Any) -> BookItem:
    if data == "Separator":
        return Separator()
    if isinstance(data, dict) and len(data) == 1:
        ((kind, value),) = data.items()
        if kind == "Chapter":
            return Chapter.from_json(value)
        if kind == "PartTitle" and isinstance(value, str):
            return PartTitle(value)
    raise ValueError(f"unrecognised book item: {data!r}")


def _item_to_json(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_json()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


@dataclass
class Book:
    """A whole book: a sequence of top-level items."""

    sections: list[BookItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=lambda: {"__non_exhaustive": None})

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Book:
        """Build a book from its JSON object."""
        if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
            raise ValueError("book must be an object with a 'sections' list")
        return cls(
            sections=[_item_from_json(item) for item in data["sections"]],
            extra={k: v for k, v in data.items() if k != "sections"},
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this book."""
        return {"sections": [_item_to_json(item) for item in self.sections], **self.extra}

    def chapters(self) -> Iterator[Chapter]:
        """Yield every chapter, depth first, in book order."""

        def walk(items: list[BookItem]) -> Iterator[Chapter]:
            for item in items:
                if isinstance(item, Chapter):
                    yield item
                    yield from walk(item.sub_items)

        return walk(self.sections)


def parse_preprocessor_input(stream: IO[str]) -> tuple[dict[str, Any], Book]:
    """Read the ``[context, book]`` pair that mdBook sends to a preprocessor."""
    data = json.load(stream)
    if not isinstance(data, list) or len(data) != 2 or not isinstance(data[0], dict):
        raise ValueError("preprocessor input must be a [context, book] pair")
    return data[0], Book.from_json(data[1])