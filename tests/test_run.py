"""End-to-end tests for the run.py tracking loop."""

from __future__ import annotations

import csv

import pytest

import run


RIG_YAML = """
screen:
  bottom_left: [-1.0, -1.0, 5.0]
  top_right: [1.0, 1.0, 5.0]
camera:
  position: [0.0, 0.0, 0.0]
  far_clip: 100.0
tracking:
  start: [-1.0, 0.0, 0.0]
  end: [1.0, 0.0, 0.0]
  frames: 3
output:
  log_interval: 1
"""


@pytest.fixture
def rig_config(tmp_path):
    path = tmp_path / "rig.yaml"
    path.write_text(RIG_YAML)
    return path


def read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def test_main_writes_one_row_per_frame(rig_config, tmp_path) -> None:
    out = tmp_path / "out" / "frames.csv"

    assert run.main(["--config", str(rig_config), "--output", str(out)]) == 0

    rows = read_rows(out)
    assert [int(r["frame"]) for r in rows] == [0, 1, 2]
    assert [float(r["m02"]) for r in rows] == [1.0, 0.0, -1.0]
    assert all(float(r["near"]) == 5.0 for r in rows)
    assert all(float(r["m32"]) == -1.0 for r in rows)


def test_cli_overrides(rig_config, tmp_path) -> None:
    out = tmp_path / "frames.csv"

    code = run.main([
        "--config", str(rig_config),
        "--output", str(out),
        "--viewpoint", "0", "0", "1",
        "--frames", "2",
        "--far", "50",
    ])

    assert code == 0
    rows = read_rows(out)
    assert len(rows) == 2
    assert float(rows[0]["near"]) == 4.0
    assert float(rows[0]["far"]) == 50.0
    assert float(rows[1]["eye_z"]) == 1.0


def test_degenerate_geometry_returns_error_code(tmp_path, capsys) -> None:
    path = tmp_path / "flat.yaml"
    path.write_text(RIG_YAML.replace("top_right: [1.0, 1.0, 5.0]", "top_right: [-1.0, 1.0, 5.0]"))

    assert run.main(["--config", str(path), "--output", str(tmp_path / "x.csv")]) == 1
    assert "[Error]" in capsys.readouterr().out
    assert not (tmp_path / "x.csv").exists()


def test_permissive_flag_records_non_finite_entries(tmp_path) -> None:
    path = tmp_path / "flat.yaml"
    path.write_text(RIG_YAML.replace("top_right: [1.0, 1.0, 5.0]", "top_right: [-1.0, 1.0, 5.0]"))
    out = tmp_path / "frames.csv"

    assert run.main(["--config", str(path), "--output", str(out), "--frames", "1", "--permissive"]) == 0

    rows = read_rows(out)
    assert rows[0]["m00"] in ("inf", "-inf", "nan")


def test_zero_log_interval_logs_last_frame_only(tmp_path, capsys) -> None:
    path = tmp_path / "quiet.yaml"
    path.write_text(RIG_YAML.replace("log_interval: 1", "log_interval: 0"))
    out = tmp_path / "frames.csv"

    assert run.main(["--config", str(path), "--output", str(out)]) == 0

    frame_lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("Frame ")]
    assert len(frame_lines) == 1
    assert frame_lines[0].startswith("Frame 0002/3")
    assert len(read_rows(out)) == 3
