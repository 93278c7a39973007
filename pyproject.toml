[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursebook"
version = "0.1.0"
description = "Course structure, schedules and exercise extraction for mdBook-based training courses."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
    "markdown-it-py",
]
keywords = ["mdbook", "preprocessor", "renderer", "course", "schedule", "markdown", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdbook-course = "coursebook.preprocessor:main"
course-schedule = "coursebook.schedule:main"
course-content = "coursebook.content:main"
mdbook-exerciser = "coursebook.exerciser:main"
logfilter-demo = "coursebook.logfilter:main"

[tool.hatch.build.targets.wheel]
packages = ["coursebook"]

[tool.pytest.ini_options]
addopts = "-ra"
