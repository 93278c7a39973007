"""Dump the full text of every course, in course order."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from coursebook.book import Book
from coursebook.course import Courses


def print_content(courses: Courses, src_dir: str | os.PathLike[str]) -> None:
    """Print every course's structure with the text of each slide's sources."""
    root = Path(src_dir)
    for course in courses:
        print(f"# COURSE: {course.name}")
        for session in course:
            print(f"# SESSION: {session.name}")
            for segment in session:
                print(f"# SEGMENT: {segment.name}")
                for slide in segment:
                    print(f"# SLIDE: {slide.name}")
                    for path in slide.source_paths:
                        print((root / path).read_text(encoding="utf-8"))


def _read_book(path: str | None) -> Book:
    if path is None or path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as stream:
            data = json.load(stream)
    if isinstance(data, list) and len(data) == 2:
        data = data[1]
    return Book.from_json(data)


def main(argv: list[str] | None = None) -> int:
    """Print the content of every course in a book given as JSON."""
    parser = argparse.ArgumentParser(description="Print the content of each course")
    parser.add_argument(
        "--book",
        help="JSON book, as given to preprocessors (default: standard input)",
    )
    parser.add_argument(
        "--src-dir", default="src", help="directory holding the chapter sources"
    )
    args = parser.parse_args(argv)

    try:
        book = _read_book(args.book)
    except (OSError, ValueError) as exc:
        print(f"Unable to load the book: {exc}", file=sys.stderr)
        return 1
    try:
        courses, _ = Courses.extract_structure(book)
    except ValueError as exc:
        print(f"Unable to extract course structure: {exc}", file=sys.stderr)
        return 1

    print_content(courses, args.src_dir)
    return 0