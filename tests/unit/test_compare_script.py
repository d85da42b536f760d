from __future__ import annotations

import runpy
import sys
from pathlib import Path

import pytest

from fri_schedule.utils import config

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "compare_schedules.py"


def _run(monkeypatch, *args: str) -> None:
    # the script writes into the global config; restore it afterwards
    monkeypatch.setattr(config, "max_folding_bits", config.max_folding_bits)
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_script_prints_comparison(monkeypatch, capsys) -> None:
    _run(monkeypatch, "--log-degree", "12", "--blowup", "4", "--queries", "2", "--folding-factors", "2", "3")
    out = capsys.readouterr().out

    assert "degree=4096 blowup=4 queries=2" in out
    assert "optimal" in out
    assert "fixed_4" in out
    assert "fixed_8" in out


def test_script_reports_invalid_parameters(monkeypatch, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, "--log-degree", "10", "--blowup", "3")

    assert excinfo.value.code == 2
    assert "[error]" in capsys.readouterr().out
