import io

from drills.loggers import Logger, StderrLogger, VerbosityFilter, do_things, main


class RecordingLogger(Logger):
    def __init__(self):
        self.records = []

    def log(self, verbosity, message):
        self.records.append((verbosity, message))


def test_do_things_logs_both_messages():
    recorder = RecordingLogger()
    do_things(recorder)
    assert recorder.records == [(5, "FYI"), (2, "Uhoh")]


def test_filter_drops_messages_above_limit():
    recorder = RecordingLogger()
    do_things(VerbosityFilter(max_verbosity=3, inner=recorder))
    assert recorder.records == [(2, "Uhoh")]


def test_filter_passes_message_at_limit():
    recorder = RecordingLogger()
    VerbosityFilter(max_verbosity=5, inner=recorder).log(5, "edge")
    assert recorder.records == [(5, "edge")]


def test_filters_can_be_stacked():
    recorder = RecordingLogger()
    stacked = VerbosityFilter(4, VerbosityFilter(2, recorder))
    for level in range(6):
        stacked.log(level, level)
    assert recorder.records == [(0, 0), (1, 1), (2, 2)]


def test_stderr_logger_writes_to_stderr(capsys):
    StderrLogger().log(2, "Uhoh")
    assert capsys.readouterr().err == "verbosity=2: Uhoh\n"


def test_stderr_logger_formats_any_message():
    stream = io.StringIO()
    StderrLogger(stream).log(7, 3.5)
    assert stream.getvalue() == "verbosity=7: 3.5\n"


def test_main_logs_only_low_verbosity(capsys):
    main()
    captured = capsys.readouterr()
    assert captured.err == "verbosity=2: Uhoh\n"
    assert captured.out == ""