from coursebook.book import Chapter
from coursebook.course import Slide
from coursebook.timing_info import insert_timing_info


def _chapter(content, source_path="a.md"):
    return Chapter("A", content=content, path=source_path, source_path=source_path)


def test_inserts_timing_into_details():
    slide = Slide("A", minutes=10, source_paths=["a.md"])
    chapter = _chapter("text\n<details>notes</details>")
    insert_timing_info(slide, chapter)
    assert chapter.content == (
        "text\n<details>\nThis slide should take about 10 minutes. notes</details>"
    )


def test_singular_minute():
    slide = Slide("A", minutes=1, source_paths=["a.md"])
    chapter = _chapter("<details>")
    insert_timing_info(slide, chapter)
    assert "should take about 1 minute. " in chapter.content


def test_mentions_sub_slides():
    slide = Slide("A", minutes=5, source_paths=["a.md", "a/b.md"])
    chapter = _chapter("<details>")
    insert_timing_info(slide, chapter)
    assert "This slide and its sub-slides should take about 5 minutes. " in chapter.content


def test_sub_chapter_is_unchanged():
    slide = Slide("A", minutes=5, source_paths=["a.md", "a/b.md"])
    chapter = _chapter("<details>notes", source_path="a/b.md")
    insert_timing_info(slide, chapter)
    assert chapter.content == "<details>notes"


def test_without_details_is_unchanged():
    slide = Slide("A", minutes=5, source_paths=["a.md"])
    chapter = _chapter("no notes here")
    insert_timing_info(slide, chapter)
    assert chapter.content == "no notes here"


def test_zero_minutes_is_unchanged():
    slide = Slide("A", minutes=0, source_paths=["a.md"])
    chapter = _chapter("<details>notes")
    insert_timing_info(slide, chapter)
    assert chapter.content == "<details>notes"


def test_every_details_block_gets_the_message():
    slide = Slide("A", minutes=7, source_paths=["a.md"])
    chapter = _chapter("<details>one</details><details>two</details>")
    insert_timing_info(slide, chapter)
    assert chapter.content.count("should take about 7 minutes. ") == 2