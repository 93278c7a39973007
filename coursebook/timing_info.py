"""Timing notes added to the speaker notes of slides."""

from __future__ import annotations

from coursebook.book import Chapter
from coursebook.course import Slide


def insert_timing_info(slide: Slide, chapter: Chapter) -> None:
    """Add the slide's expected duration to the speaker notes of ``chapter``.

    Only the slide's first chapter is changed, and only if it has speaker
    notes (a ``<details>`` block) and the slide has a duration.
    """
    if slide.minutes <= 0 or slide.is_sub_chapter(chapter):
        return
    if "<details>" not in chapter.content:
        return
    plural = "minute" if slide.minutes == 1 else "minutes"
    subslides = "and its sub-slides " if len(slide.source_paths) > 1 else ""
    message = f"This slide {subslides}should take about {slide.minutes} {plural}. "
    chapter.content = chapter.content.replace("<details>", f"<details>\n{message}")