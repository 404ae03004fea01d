from __future__ import annotations

import pytest

from nbody_physics.__main__ import main
from nbody_physics.io import RunConfig, save_config


def test_zero_steps_prints_initial_energy_twice(capsys) -> None:
    assert main(["--steps", "0"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["-0.169075164", "-0.169075164"]


def test_config_file_with_override(tmp_path, capsys) -> None:
    path = tmp_path / "run.json"
    save_config(path, RunConfig(dt=0.01, steps=5))
    assert main(["--config", str(path), "--steps", "1000"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["-0.169075164", "-0.169087605"]


def test_missing_config_reports_error(tmp_path, capsys) -> None:
    assert main(["--config", str(tmp_path / "nope.json")]) == 2
    assert "error:" in capsys.readouterr().err


def test_null_config_value_reports_error(tmp_path, capsys) -> None:
    path = tmp_path / "run.json"
    path.write_text('{"simulation": {"steps": null}}', encoding="utf-8")
    assert main(["--config", str(path)]) == 2
    assert "error: steps must be an integer" in capsys.readouterr().err


def test_log_level_is_validated(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "loud", "--steps", "0"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
    assert main(["--log-level", "info", "--steps", "0"]) == 0


def test_sample_every_from_config_reports_drift(tmp_path, capsys) -> None:
    path = tmp_path / "run.json"
    save_config(path, RunConfig(dt=0.01, steps=10, sample_every=5))
    assert main(["--config", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["-0.169075164", "-0.169073022", "max energy drift: 2.142e-06"]
