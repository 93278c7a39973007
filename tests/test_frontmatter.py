import pytest

from coursebook.book import Chapter
from coursebook.frontmatter import Frontmatter, FrontmatterError, split_frontmatter


def _chapter(content):
    return Chapter(name="Chapter", content=content, source_path="chapter.md")


def test_full_frontmatter():
    chapter = _chapter(
        "---\nminutes: 5\ntarget_minutes: 180\ncourse: Fundamentals\nsession: Day 1 Morning\n---\n# Title\n"
    )
    frontmatter, content = split_frontmatter(chapter)
    assert frontmatter == Frontmatter(
        minutes=5, target_minutes=180, course="Fundamentals", session="Day 1 Morning"
    )
    assert content == "# Title\n"


def test_no_frontmatter():
    chapter = _chapter("# Title\n\nSome text.\n")
    frontmatter, content = split_frontmatter(chapter)
    assert frontmatter == Frontmatter()
    assert content == chapter.content


def test_split_does_not_modify_chapter():
    original = "---\nminutes: 3\n---\nBody\n"
    chapter = _chapter(original)
    split_frontmatter(chapter)
    assert chapter.content == original


def test_unknown_keys_ignored():
    frontmatter, content = split_frontmatter(_chapter("---\nminutes: 3\nother: x\n---\nBody\n"))
    assert frontmatter.minutes == 3
    assert frontmatter.course is None
    assert content == "Body\n"


def test_empty_frontmatter():
    frontmatter, content = split_frontmatter(_chapter("---\n---\nBody\n"))
    assert frontmatter == Frontmatter()
    assert content == "Body\n"


def test_invalid_yaml():
    with pytest.raises(FrontmatterError, match="chapter.md"):
        split_frontmatter(_chapter("---\nminutes: [unclosed\n---\nBody\n"))


def test_negative_minutes_rejected():
    with pytest.raises(FrontmatterError):
        split_frontmatter(_chapter("---\nminutes: -4\n---\nBody\n"))


def test_non_mapping_rejected():
    with pytest.raises(FrontmatterError):
        split_frontmatter(_chapter("---\n- a\n- b\n---\nBody\n"))


def test_course_none_string_preserved():
    frontmatter, _ = split_frontmatter(_chapter("---\ncourse: none\n---\n"))
    assert frontmatter.course == "none"