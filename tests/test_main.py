import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import config
import main
from config import CHUNK_SIZE


def test_parse_args_defaults():
    assert main.parse_args(["main.py"]) == (config.DEFAULT_SEED, config.INITIAL_RADIUS, config.GEN_WORKERS)


def test_parse_args_overrides():
    assert main.parse_args(["main.py", "-3", "1", "2"]) == (-3, 1, 2)


def test_parse_args_rejects_garbage():
    with pytest.raises(SystemExit):
        main.parse_args(["main.py", "seed"])


def test_main_prints_surface_map(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", False)
    assert main.main(["main.py", "42", "1"]) == 0
    out = capsys.readouterr().out
    assert "AREA] generated chunks=8" in out
    rows = [line for line in out.splitlines() if not line.startswith("[")]
    assert len(rows) == 2 * CHUNK_SIZE
    assert all(len(row.split()) == 2 * CHUNK_SIZE for row in rows)


def test_main_reports_bad_radius(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_COLOR", False)
    assert main.main(["main.py", "1", "-1"]) == 2
    assert "ERROR" in capsys.readouterr().out
