# coursebook

Tools for mdBook books that are organised as training courses: courses made
of sessions, sessions made of segments, segments made of slides. The course
structure comes from the chapter order of the book together with YAML
frontmatter at the top of each chapter.

## Frontmatter

```markdown
---
course: Fundamentals
session: Day 1 Morning
target_minutes: 180
minutes: 10
---
# Welcome
```

- `course` starts a new course (`none` ends the current one); a `session`
  must be given whenever `course` is.
- `session` starts a new session within the current course.
- `minutes` is how long a slide takes to teach.
- `target_minutes` adds to the planned length of the session.

Each top-level chapter inside a session becomes a segment whose first slide
is the chapter itself; its sub-chapters become further slides, and deeper
chapters are folded into their slide. Sub-chapters may not set `course` or
`session`. A session's length counts a 10 minute break between segments
that have a duration.

## Commands

Every command works on a book given as JSON, in the form mdBook passes to
preprocessors and renderers.

### `mdbook-course`

An mdBook preprocessor. It reads the `[context, book]` pair as JSON on
standard input, removes the frontmatter, adds timing notes to speaker notes
(`<details>` blocks) of a slide's first chapter, expands directives, and
writes the book as JSON to standard output:

- `{{%session outline}}` – table of the segments of the current session
- `{{%segment outline}}` – table of the slides of the current segment
- `{{%course outline}}` – schedule of the current course
- `{{%course outline NAME}}` – schedule of the named course

Any other directive is replaced by its own text. Errors are printed to
standard error with exit status 1.

`mdbook-course supports <renderer>` exits successfully for every renderer.

### `course-schedule`

Prints a summary of the schedule. The book is read from `--book FILE`, or
from standard input if that is not given (or is `-`); either a book object or
a `[context, book]` pair is accepted.

```
course-schedule --book book.json            # session summary
course-schedule --book book.json sessions   # session summary
course-schedule --book book.json pr         # summary for a pull request
```

Durations are rounded up to five minutes and flagged when a session or
course runs too long or short of its target. `course-schedule segments` is
accepted by the argument parser but reports that the segment summary is not
available.

### `course-content`

Prints the Markdown source of every slide of every course, under
`# COURSE:`, `# SESSION:`, `# SEGMENT:` and `# SLIDE:` headings. The book
is read as for `course-schedule` (`--book`, or standard input), and slide
sources are read from `--src-dir` (default `src`).

### `mdbook-exerciser`

An mdBook renderer that writes starter code for exercises. It reads the
render context as JSON on standard input. A code block preceded by a comment
of the form

```markdown
<!-- File src/main.rs -->
```

is written to that file under the output directory, in a subdirectory named
after the stem of the chapter's file. The output directory is taken from
`output.exerciser.output-directory` in the book configuration; it is removed
and created afresh on every run.

### `logfilter-demo`

A small demonstration of a logger that only passes on messages matching a
predicate: it writes the one message containing "yikes" to standard error.

## Library use

```python
from coursebook.markdown import duration, relative_link, Table

duration(61)                                         # '1 hour and 5 minutes'
relative_link("references/foo.md", "hello-world.md")  # '../hello-world.md'

table = Table(["Segment", "Duration"])
table.add_row(["Welcome", duration(5)])
print(table)
```

- `coursebook.book` – `Book`, `Chapter`, `PartTitle`, `Separator` and
  `parse_preprocessor_input` for the JSON book format.
- `coursebook.frontmatter.split_frontmatter(chapter)` – returns a
  `Frontmatter` and the remaining text; raises `FrontmatterError`.
- `coursebook.course.Courses.extract_structure(book)` – builds the
  `Course` / `Session` / `Segment` / `Slide` hierarchy, stripping
  frontmatter; raises `CourseStructureError` for an invalid layout.
- `coursebook.replacements.replace` and
  `coursebook.timing_info.insert_timing_info` – the two steps of the
  preprocessor.
- `coursebook.exerciser.process(output_directory, text)` and
  `process_all(book, output_directory)` – exercise extraction.
- `coursebook.logfilter` – `Logger`, `StderrLogger` and `Filter`.

## What it does not do

The package does not load a book from its source directory (`book.toml`
and `SUMMARY.md`): `course-schedule` and `course-content` need the book as
JSON, and there is no per-segment schedule summary.

## Tests

```
pip install -e .[test]
pytest
```