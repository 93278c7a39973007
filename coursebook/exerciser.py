"""Extraction of exercise starter code from Markdown chapters.

A code block preceded by an HTML comment of the form ``<!-- File NAME -->``
is written to ``NAME`` below the output directory. Code blocks without such a
comment are ignored, as are comments that are never followed by a code block.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import shutil
import sys
from pathlib import Path, PurePath

from markdown_it import MarkdownIt

from coursebook.book import Book

FILENAME_START = "<!-- File "
FILENAME_END = " -->"

_log = logging.getLogger(__name__)
_CODE_BLOCKS = frozenset({"fence", "code_block"})


def _filename_from_html(line: str) -> str | None:
    html = line.strip()
    if len(html) < len(FILENAME_START) + len(FILENAME_END):
        return None
    if html.startswith(FILENAME_START) and html.endswith(FILENAME_END):
        return html[len(FILENAME_START) : len(html) - len(FILENAME_END)]
    return None


def process(output_directory: str | os.PathLike[str], input_contents: str) -> None:
    """Write every annotated code block in ``input_contents`` below ``output_directory``."""
    output_directory = Path(output_directory)
    next_filename: str | None = None

    for token in MarkdownIt("commonmark").parse(input_contents):
        _log.debug("%r", token)
        if token.type == "html_block":
            for line in token.content.splitlines():
                filename = _filename_from_html(line)
                if filename is not None:
                    next_filename = filename
                    _log.info("Next file: %r", next_filename)
        elif token.type in _CODE_BLOCKS:
            _log.info("Code block %r", token.info)
            if next_filename is None:
                continue
            full_filename = output_directory / next_filename
            _log.info("Writing %s", full_filename)
            full_filename.parent.mkdir(parents=True, exist_ok=True)
            with open(full_filename, "w", encoding="utf-8", newline="") as output:
                output.write(token.content)
            next_filename = None


def process_all(book: Book, output_directory: str | os.PathLike[str]) -> None:
    """Extract the exercises of every chapter of ``book``.

    Each chapter's files go in a subdirectory named after the chapter file,
    without its parent directories or extension.
    """
    output_directory = Path(output_directory)
    for chapter in book.chapters():
        _log.debug("Chapter %r / %r", chapter.path, chapter.source_path)
        if chapter.path is None:
            continue
        stem = PurePath(chapter.path).stem
        if not stem or stem in (".", ".."):
            raise ValueError(f"Chapter {chapter.path!r} has no file stem")
        process(output_directory / stem, chapter.content)


def _output_directory(context: dict) -> Path:
    renderer = (context.get("config") or {}).get("output", {}).get("exerciser")
    if not isinstance(renderer, dict):
        raise ValueError("Missing output.exerciser configuration")
    if "output-directory" not in renderer:
        raise ValueError(
            "Missing output.exerciser.output-directory configuration value"
        )
    value = renderer["output-directory"]
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def main(argv: list[str] | None = None) -> int:
    """Run as an mdBook renderer, reading the render context from standard input."""
    parser = argparse.ArgumentParser(
        description="Extract starter code for exercises from Markdown files."
    )
    parser.parse_args(argv)
    logging.basicConfig()

    try:
        context = json.load(sys.stdin)
        if not isinstance(context, dict):
            raise ValueError("render context must be a JSON object")
        output_directory = _output_directory(context)
        book = Book.from_json(context.get("book"))
    except ValueError as exc:
        print(f"Parsing stdin: {exc}", file=sys.stderr)
        return 1

    shutil.rmtree(output_directory, ignore_errors=True)
    try:
        output_directory.mkdir()
    except OSError as exc:
        print(
            f"Failed to create output directory {str(output_directory)!r}: {exc}",
            file=sys.stderr,
        )
        return 1

    try:
        process_all(book, output_directory)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0