import pytest

from coursebook.logfilter import Filter, Logger, StderrLogger, main


class Recorder(Logger):
    def __init__(self):
        self.messages = []

    def log(self, verbosity, message):
        self.messages.append((verbosity, message))


def test_stderr_logger_format(capsys):
    StderrLogger().log(5, "FYI")
    captured = capsys.readouterr()
    assert captured.err == "verbosity=5: FYI\n"
    assert captured.out == ""


def test_filter_passes_accepted_messages():
    inner = Recorder()
    logger = Filter(inner, lambda v, m: "yikes" in m)
    logger.log(5, "FYI")
    logger.log(1, "yikes, something went wrong")
    logger.log(2, "uhoh")
    assert inner.messages == [(1, "yikes, something went wrong")]


def test_filter_predicate_sees_verbosity():
    inner = Recorder()
    logger = Filter(inner, lambda v, m: v <= 2)
    for level in range(5):
        logger.log(level, f"m{level}")
    assert [v for v, _ in inner.messages] == [0, 1, 2]


def test_filters_compose():
    inner = Recorder()
    logger = Filter(Filter(inner, lambda v, m: v > 0), lambda v, m: m.startswith("a"))
    logger.log(0, "apple")
    logger.log(1, "apple")
    logger.log(1, "banana")
    assert inner.messages == [(1, "apple")]


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().err == "verbosity=1: yikes, something went wrong\n"