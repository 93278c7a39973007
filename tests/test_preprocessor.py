import io
import json

from coursebook.book import Book, Chapter
from coursebook.course import Courses
from coursebook.preprocessor import main, preprocess


def _book():
    welcome = Chapter(
        "Welcome",
        content="---\ncourse: Fundamentals\nsession: Day 1\n---\n{{%segment outline}}\n",
        path="welcome.md",
        source_path="welcome.md",
    )
    welcome.sub_items.append(
        Chapter(
            "Hello",
            content="---\nminutes: 20\n---\n# Hello\n<details>notes</details>\n",
            path="welcome/hello.md",
            source_path="welcome/hello.md",
        )
    )
    intro = Chapter(
        "Intro",
        content="---\ncourse: none\n---\n{{%session outline}}\n",
        path="intro.md",
        source_path="intro.md",
    )
    return Book(sections=[welcome, intro])


def _run(book):
    stdin = io.StringIO(json.dumps([{"root": "."}, book.to_json()]))
    stdout = io.StringIO()
    preprocess(stdin, stdout)
    return Book.from_json(json.loads(stdout.getvalue()))


def test_segment_outline_is_expanded():
    result = _run(_book())
    courses, _ = Courses.extract_structure(_book())
    segment = courses.courses[0].sessions[0].segments[0]
    welcome = result.sections[0]
    assert welcome.content == segment.outline() + "\n"


def test_timing_info_is_inserted_and_frontmatter_stripped():
    result = _run(_book())
    hello = result.sections[0].sub_items[0]
    assert "This slide should take about 20 minutes. " in hello.content
    assert not hello.content.startswith("---")


def test_chapter_outside_course_gets_plain_replacement():
    result = _run(_book())
    intro = result.sections[1]
    assert intro.content == "session outline\n"


def test_main_supports_any_renderer():
    assert main(["supports", "html"]) == 0


def test_main_reports_invalid_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("not json"))
    assert main([]) == 1
    assert capsys.readouterr().err.strip()


def test_main_reports_structure_error(monkeypatch, capsys):
    bad = Book(
        sections=[
            Chapter(
                "Bad",
                content="---\ncourse: Fundamentals\n---\n",
                path="bad.md",
                source_path="bad.md",
            )
        ]
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps([{}, bad.to_json()])))
    assert main([]) == 1
    assert "'session' must appear" in capsys.readouterr().err


def test_main_writes_processed_book(monkeypatch, capsys):
    book = _book()
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps([{}, book.to_json()])))
    assert main([]) == 0
    written = Book.from_json(json.loads(capsys.readouterr().out))
    assert [item.name for item in written.sections] == ["Welcome", "Intro"]