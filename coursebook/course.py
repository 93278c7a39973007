"""The course hierarchy: courses, sessions, segments and slides.

The structure is recovered from the order of chapters in the book and from
annotations in each chapter's frontmatter. A top-level chapter with a
``course`` property starts a new course (``course: none`` ends the current
one), a ``session`` property starts a new session, and every top-level
chapter inside a course becomes a segment whose first slide is the chapter
itself. Sub-chapters of a segment become further slides, and their own
sub-chapters are folded into those slides.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from coursebook.book import Book, BookItem, Chapter
from coursebook.frontmatter import Frontmatter, split_frontmatter
from coursebook.markdown import Table, duration

BREAK_DURATION = 10
"""Minutes of break between segments of a session."""


class CourseStructureError(ValueError):
    """Raised when the book's frontmatter describes an invalid course layout."""


def _chapters(items: list[BookItem]) -> Iterator[Chapter]:
    return (item for item in items if isinstance(item, Chapter))


def _strip_frontmatter(chapter: Chapter) -> Frontmatter:
    frontmatter, content = split_frontmatter(chapter)
    chapter.content = content
    return frontmatter


def _segment_table(segments: list[Segment]) -> Table:
    table = Table(["Segment", "Duration"])
    for segment in segments:
        # Short segments (welcomes, wrap-ups and the like) are left out.
        if segment.minutes() == 0:
            continue
        table.add_row([segment.name, duration(segment.minutes())])
    return table


@dataclass
class Slide:
    """A single topic, possibly spread over several chapters."""

    name: str
    minutes: int = 0
    source_paths: list[str] = field(default_factory=list)

    @classmethod
    def _from_chapter(cls, frontmatter: Frontmatter, chapter: Chapter) -> Slide:
        slide = cls(chapter.name)
        slide._add(frontmatter, chapter)
        return slide

    def _add(self, frontmatter: Frontmatter, chapter: Chapter) -> None:
        self.minutes += frontmatter.minutes or 0
        if chapter.source_path is not None:
            self.source_paths.append(chapter.source_path)

    def _add_sub_chapters(self, chapter: Chapter) -> None:
        for sub in _chapters(chapter.sub_items):
            frontmatter = _strip_frontmatter(sub)
            if frontmatter.course is not None or frontmatter.session is not None:
                raise CourseStructureError(
                    f"{sub.path!r}: sub-slides may not have 'course' or 'session' set"
                )
            self._add(frontmatter, sub)
            self._add_sub_chapters(sub)

    def is_sub_chapter(self, chapter: Chapter) -> bool:
        """Return True unless ``chapter`` is the slide's first (parent) chapter."""
        first = self.source_paths[0] if self.source_paths else None
        return chapter.source_path != first


@dataclass
class Segment:
    """A collection of slides with a related theme."""

    name: str
    slides: list[Slide] = field(default_factory=list)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def _add_slide(self, frontmatter: Frontmatter, chapter: Chapter, recurse: bool) -> None:
        slide = Slide._from_chapter(frontmatter, chapter)
        if recurse:
            slide._add_sub_chapters(chapter)
        self.slides.append(slide)

    def minutes(self) -> int:
        """Total duration of the segment's slides."""
        return sum(slide.minutes for slide in self.slides)

    def outline(self) -> str:
        """Markdown outline of this segment's slides."""
        table = Table(["Slide", "Duration"])
        for slide in self.slides:
            if slide.minutes == 0:
                continue
            table.add_row([slide.name, duration(slide.minutes)])
        return (
            f"This segment should take about {duration(self.minutes())}. "
            f"It contains:\n\n{table}"
        )


@dataclass
class Session:
    """A block of instructional time made of segments."""

    name: str
    segments: list[Segment] = field(default_factory=list)
    _target_minutes: int = field(default=0, repr=False)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def _add_segment(self, frontmatter: Frontmatter, chapter: Chapter) -> None:
        segment = Segment(chapter.name)
        segment._add_slide(frontmatter, chapter, recurse=False)
        for sub in _chapters(chapter.sub_items):
            segment._add_slide(_strip_frontmatter(sub), sub, recurse=True)
        self.segments.append(segment)

    def outline(self) -> str:
        """Markdown outline of this session's segments."""
        return (
            f"Including {BREAK_DURATION} minute breaks, this session should take "
            f"about {duration(self.minutes())}. It contains:\n\n"
            f"{_segment_table(self.segments)}"
        )

    def minutes(self) -> int:
        """Total duration, including breaks between non-empty segments."""
        timed = [segment.minutes() for segment in self.segments if segment.minutes() > 0]
        if not timed:
            return 0
        return sum(timed) + (len(timed) - 1) * BREAK_DURATION

    def target_minutes(self) -> int:
        """Target duration, falling back to the actual duration if none is set."""
        return self._target_minutes if self._target_minutes > 0 else self.minutes()


@dataclass
class Course:
    """The level of content at which students enroll."""

    name: str
    sessions: list[Session] = field(default_factory=list)

    def __iter__(self) -> Iterator[Session]:
        return iter(self.sessions)

    def _session(self, name: str) -> Session:
        for session in self.sessions:
            if session.name == name:
                return session
        session = Session(name)
        self.sessions.append(session)
        return session

    def minutes(self) -> int:
        """Total duration of all sessions, not counting time between sessions."""
        return sum(session.minutes() for session in self.sessions)

    def target_minutes(self) -> int:
        """Total target duration of all sessions."""
        return sum(session.target_minutes() for session in self.sessions)

    def schedule(self) -> str:
        """Markdown schedule of the whole course."""
        parts = ["Course schedule:\n"]
        for session in self.sessions:
            parts.append(
                f" * {session.name} ({duration(session.minutes())}, including breaks)\n\n"
            )
            parts.append(f"{_segment_table(session.segments)}\n\n")
        return "".join(parts)


@dataclass
class Courses:
    """All courses found in a book, in order of first appearance."""

    courses: list[Course] = field(default_factory=list)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses)

    def _course(self, name: str) -> Course:
        found = self.find_course(name)
        if found is not None:
            return found
        course = Course(name)
        self.courses.append(course)
        return course

    @classmethod
    def extract_structure(cls, book: Book) -> tuple[Courses, Book]:
        """Extract the course structure, stripping frontmatter from the book."""
        courses = cls()
        course_name: str | None = None
        session_name: str | None = None

        for chapter in _chapters(book.sections):
            frontmatter = _strip_frontmatter(chapter)

            if frontmatter.course is not None:
                session_name = None
                course_name = None if frontmatter.course == "none" else frontmatter.course

            if frontmatter.session is not None:
                session_name = frontmatter.session

            if course_name is not None and session_name is None:
                raise CourseStructureError(
                    f"{chapter.path!r}: 'session' must appear in frontmatter "
                    "when 'course' appears"
                )

            if course_name is not None and session_name is not None:
                session = courses._course(course_name)._session(session_name)
                session._target_minutes += frontmatter.target_minutes or 0
                session._add_segment(frontmatter, chapter)

        return courses, book

    def find_course(self, name: str) -> Course | None:
        """Return the course with the given name, if any."""
        return next((course for course in self.courses if course.name == name), None)

    def find_slide(
        self, chapter: Chapter
    ) -> tuple[Course, Session, Segment, Slide] | None:
        """Locate the slide built from ``chapter`` and return its full path."""
        if chapter.source_path is None:
            return None
        for course in self.courses:
            for session in course:
                for segment in session:
                    for slide in segment:
                        if chapter.source_path in slide.source_paths:
                            return course, session, segment, slide
        return None