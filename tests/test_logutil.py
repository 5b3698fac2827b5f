import os
import sys
import threading
import time

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import config
import logutil


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_log_format(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", False)
    logutil.log("MAIN", "hello")
    (line,) = _lines(capsys)
    assert line.startswith(f"[INFO pid{os.getpid()} MAIN] ")
    assert line.endswith("hello")


def test_worker_thread_is_tagged(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", False)
    t = threading.Thread(target=logutil.log, args=("MAIN", "from worker"), name="Gen-1")
    t.start()
    t.join()
    (line,) = _lines(capsys)
    assert "thrGen-1 MAIN]" in line


def test_level_threshold(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "WARN")
    logutil.log("MAIN", "quiet", level="INFO")
    logutil.log("MAIN", "loud", level="WARN")
    assert [l.split("] ")[1] for l in _lines(capsys)] == ["loud"]


def test_scope_switches(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", False)
    monkeypatch.setattr(config, "LOG_GENERATION", False)
    monkeypatch.setattr(config, "LOG_COLUMNS", True)
    logutil.log("AREA", "hidden")
    logutil.log("AREA", "problem", level="ERROR")
    logutil.log("MAPGEN", "shown")
    assert [l.split("] ")[1] for l in _lines(capsys)] == ["problem", "shown"]


def test_color_by_level(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", True)
    monkeypatch.delenv("NO_COLOR", raising=False)
    logutil.log("MAIN", "plain")
    logutil.log("MAIN", "bad", level="ERROR")
    plain, bad = _lines(capsys)
    assert "\x1b[" not in plain
    assert bad.startswith("\x1b[31m") and bad.endswith("\x1b[0m")


def test_no_color_env(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", True)
    monkeypatch.setenv("NO_COLOR", "1")
    logutil.log("MAIN", "bad", level="ERROR")
    (line,) = _lines(capsys)
    assert "\x1b[" not in line


def test_elapsed_ms():
    start = time.perf_counter() - 0.05
    assert logutil.elapsed_ms(start) >= 50.0
