"""The mdBook preprocessor: timing notes and directive expansion."""

from __future__ import annotations

import argparse
import json
import sys
from typing import IO

from coursebook.book import parse_preprocessor_input
from coursebook.course import Courses
from coursebook.replacements import replace
from coursebook.timing_info import insert_timing_info


def preprocess(stdin: IO[str], stdout: IO[str]) -> None:
    """Read a book from ``stdin``, process it and write it to ``stdout``."""
    _, book = parse_preprocessor_input(stdin)
    courses, book = Courses.extract_structure(book)

    for chapter in book.chapters():
        found = courses.find_slide(chapter)
        if found is None:
            # Outside of a course, only directives are expanded.
            replace(courses, None, None, None, chapter)
            continue
        course, session, segment, slide = found
        insert_timing_info(slide, chapter)
        replace(courses, course, session, segment, chapter)

    json.dump(book.to_json(), stdout)


def main(argv: list[str] | None = None) -> int:
    """Run the preprocessor; return the process exit status."""
    parser = argparse.ArgumentParser(
        description="mdbook preprocessor for course books"
    )
    subcommands = parser.add_subparsers(dest="command")
    supports = subcommands.add_parser("supports")
    supports.add_argument("renderer")
    args = parser.parse_args(argv)

    if args.command == "supports":
        # Every renderer is supported.
        return 0

    try:
        preprocess(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0