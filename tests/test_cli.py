import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
import cli


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("LIFTRANK_SETTINGS", str(tmp_path / "settings.yaml"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_estimate(capsys):
    cli.main(["estimate", "--weight", "225", "--reps", "5"])
    assert "estimated 1RM 260" in capsys.readouterr().out


def test_percentile(capsys):
    cli.main(["percentile", "--lift", "225", "--body", "180", "--exercise", "squat-barbell"])
    assert "25th percentile (C- Tier)" in capsys.readouterr().out


def test_tier(capsys):
    cli.main(["tier", "25"])
    out = capsys.readouterr().out
    assert "C- Tier - Intermediate" in out
    assert "6 points to C" in out
    cli.main(["tier", "99"])
    assert "Top tier reached" in capsys.readouterr().out


def test_plan(capsys):
    cli.main(["plan", "--one-rm", "260", "--reps", "8"])
    assert "8 reps @ 80% -> 210" in capsys.readouterr().out


def test_convert(capsys):
    cli.main(["convert", "--weight", "100", "--unit", "kg"])
    assert "100.0 kg = 220.46 lbs" in capsys.readouterr().out
    cli.main(["convert", "--weight", "100", "--unit", "lbs"])
    assert "100.0 lbs = 45.36 kg" in capsys.readouterr().out


def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["bogus"])
