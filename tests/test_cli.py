import sys

import pytest

from pi_estimator import Estimator, cli


@pytest.mark.slow
@pytest.mark.parametrize("argv", [[], ["ignored", "--samples", "5", "--seed", "1"]])
def test_prints_reference_estimate(argv, capsys, monkeypatch):
    monkeypatch.delenv("PI_ESTIMATOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PI_ESTIMATOR_LOG_FILE", raising=False)
    cli.main(argv)
    out = capsys.readouterr().out
    assert out.startswith("estimate of pi is 3.14")
    assert out.endswith(" \n")
    assert out.count("\n") == 1


def test_bad_environment_exits_nonzero(capsys, monkeypatch):
    monkeypatch.setenv("PI_ESTIMATOR_LOG_LEVEL", "loud")
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown log level" in captured.err


@pytest.mark.parametrize("argv", [
    ["--help"],
    ["-h"],
    ["--", "--help"],
    ["--", "--trace"],
    ["--", "--completion"],
    ["--", "--interactive"],
    ["--", "--verbose", "--separator", "X"],
])
def test_fire_flags_are_ignored(argv, capsys, monkeypatch):
    monkeypatch.delenv("PI_ESTIMATOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PI_ESTIMATOR_LOG_FILE", raising=False)
    monkeypatch.setattr(Estimator, "estimate", lambda self: 3.14159)
    cli.main(argv)
    assert capsys.readouterr().out == "estimate of pi is 3.14159 \n"


def test_process_arguments_are_ignored(capsys, monkeypatch):
    monkeypatch.delenv("PI_ESTIMATOR_LOG_LEVEL", raising=False)
    monkeypatch.setattr(Estimator, "estimate", lambda self: 3.14159)
    monkeypatch.setattr(sys, "argv", ["pi-estimator", "--", "--completion"])
    cli.main()
    assert capsys.readouterr().out == "estimate of pi is 3.14159 \n"
