import io
import logging

from depcollapse.shared.logger import RunLogger, remove_stdlib_bridge, stdlib_level


def test_console_respects_min_level():
    stream = io.StringIO()
    log = RunLogger(min_level="WARN", stream=stream)
    log.info("hidden")
    log.warn("shown")
    out = stream.getvalue()
    assert "hidden" not in out
    assert "shown" in out


def test_trace_file_gets_everything(tmp_path):
    trace = tmp_path / "logs" / "trace.log"
    info = tmp_path / "logs" / "info.log"
    with RunLogger(log_file=info, trace_file=trace, console=False) as log:
        log.debug("pass dump")
        log.info("loaded")
    assert "pass dump" in trace.read_text()
    assert "pass dump" not in info.read_text()
    assert "loaded" in info.read_text()


def test_stdlib_bridge_routes_package_records():
    stream = io.StringIO()
    log = RunLogger(min_level="DEBUG", stream=stream)
    log.install_stdlib_bridge("depcollapse", level=logging.DEBUG)
    try:
        logging.getLogger("depcollapse.structure").debug("after pass")
    finally:
        remove_stdlib_bridge("depcollapse")
    assert "[depcollapse.structure] after pass" in stream.getvalue()
    assert logging.getLogger("depcollapse").level == logging.NOTSET


def test_summary_reports_counts_and_timers():
    stream = io.StringIO()
    log = RunLogger(stream=stream)
    with log.timer("convert"):
        log.count("sentences", 3)
    log.summary()
    out = stream.getvalue()
    assert "sentences = 3" in out
    assert "convert" in out


def test_stdlib_level():
    assert stdlib_level("trace") == logging.DEBUG
    assert stdlib_level("WARN") == logging.WARNING
