from __future__ import annotations

import pytest

from tools.gen_cave_cli import main


def _run(capsys, tmp_path, *args: str) -> list[str]:
    main(["--config", str(tmp_path / "absent.yaml"), *args])
    return capsys.readouterr().out.splitlines()


def test_cli_prints_one_line_per_row(capsys, tmp_path):
    lines = _run(capsys, tmp_path, "--width", "8", "--height", "6", "--seed", "3")

    assert len(lines) == 6
    assert all(len(line) == 8 for line in lines)
    assert any("." in line for line in lines)


def test_cli_is_deterministic_for_a_seed(capsys, tmp_path):
    args = ("--width", "12", "--height", "9", "--seed", "21", "--walkers", "2", "--max-step-length", "2")

    assert _run(capsys, tmp_path, *args) == _run(capsys, tmp_path, *args)


def test_cli_counts_tiles(capsys, tmp_path):
    lines = _run(capsys, tmp_path, "--width", "5", "--height", "4", "--walkers", "0", "--counts")

    assert lines[:4] == ["#####"] * 4
    assert lines[4:] == ["solid: 20", "floor: 0", "edge: 0", "island: 0"]


def test_cli_reads_config_file(capsys, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("generation:\n  width: 7\n  height: 3\n", encoding="utf-8")

    main(["--config", str(config)])

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 7 for line in lines)


@pytest.mark.parametrize(
    "args",
    [("--max-step-length", "0"), ("--backtrack", "2.0"), ("--walkers", "-1"), ("--walk-steps", "-3")],
)
def test_cli_rejects_invalid_parameters(capsys, tmp_path, args):
    with pytest.raises(SystemExit) as excinfo:
        _run(capsys, tmp_path, *args)

    assert excinfo.value.code == 2
