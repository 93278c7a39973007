"""Summaries of a course book's schedule."""

from __future__ import annotations

import argparse
import json
import sys

from coursebook.book import Book
from coursebook.course import Courses
from coursebook.markdown import duration


def timediff(actual: int, target: int, slop: int) -> str:
    """Describe ``actual`` against ``target``, noting differences beyond ``slop``."""
    if actual > target + slop:
        return (
            f"{duration(actual)} (\u23f0 *{duration(actual - target)} too long*)"
        )
    if actual + slop < target:
        return f"{duration(actual)}: ({duration(target - actual)} short)"
    return duration(actual)


def session_summary(courses: Courses) -> None:
    """Print a summary of every session, with its segments."""
    for course in courses:
        if course.target_minutes() == 0:
            return
        for session in course:
            print(f"### {course.name} // {session.name}")
            print(f"_{timediff(session.minutes(), session.target_minutes(), 15)}_")
            print()
            for segment in session:
                print(f"* {segment.name} - _{duration(segment.minutes())}_")
            print()


def pr_summary(courses: Courses) -> None:
    """Print a course schedule summary suitable for a pull request."""
    print("## Course Schedule")
    print("With this pull request applied, the course schedule is as follows:")
    for course in courses:
        if course.target_minutes() == 0:
            return
        print(f"### {course.name}")
        print(f"_{timediff(course.minutes(), course.target_minutes(), 15)}_")
        for session in course:
            print(
                f"* {session.name} - "
                f"_{timediff(session.minutes(), session.target_minutes(), 5)}_"
            )


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
    """Print a schedule summary of a book given as JSON."""
    parser = argparse.ArgumentParser(description="Course schedule summaries")
    parser.add_argument(
        "--book",
        help="JSON book, as given to preprocessors (default: standard input)",
    )
    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("sessions", help="Show session summary (default)")
    subcommands.add_parser("segments", help="Show segment summary")
    subcommands.add_parser("pr", help="Show summary for a PR")
    args = parser.parse_args(argv)

    if args.command == "segments":
        parser.error("the segment summary is not available")

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

    if args.command == "pr":
        pr_summary(courses)
    else:
        session_summary(courses)
    return 0