from __future__ import annotations

import pytest

from cavegen.gen import CaveGenParams, WalkerParams
from config.config_loader import ConfigLoader, load_generation_params


def _write(tmp_path, text: str):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_missing_file_yields_defaults(tmp_path):
    loader = ConfigLoader(str(tmp_path / "absent.yaml"))

    assert loader.config == {}
    assert load_generation_params(loader) == CaveGenParams()


def test_values_are_read_from_yaml(tmp_path):
    path = _write(
        tmp_path,
        """
generation:
  width: 32
  height: 20
  seed: 77
  walker_count: 4
walker:
  walk_steps: 50
  max_step_length: 3
  backtrack_probability: 0.1
""",
    )

    params = load_generation_params(ConfigLoader(path))

    assert params == CaveGenParams(
        width=32,
        height=20,
        seed=77,
        walker_count=4,
        walker=WalkerParams(walk_steps=50, max_step_length=3, backtrack_probability=0.1),
    )


def test_partial_sections_fall_back_to_defaults(tmp_path):
    path = _write(tmp_path, "generation:\n  width: 15\n")

    params = load_generation_params(ConfigLoader(path))

    assert params.width == 15
    assert params.height == 10
    assert params.walker == WalkerParams()


def test_null_seed_requests_unseeded_generation(tmp_path):
    path = _write(tmp_path, "generation:\n  seed: null\n")

    assert load_generation_params(ConfigLoader(path)).seed is None


def test_empty_file_is_treated_as_no_config(tmp_path):
    loader = ConfigLoader(_write(tmp_path, ""))

    assert loader.config == {}


def test_get_raises_without_default(tmp_path):
    loader = ConfigLoader(_write(tmp_path, "walker:\n  walk_steps: 5\n"))

    assert loader.get("walker", "walk_steps") == 5
    assert loader.get("walker", "missing", default=3) == 3
    with pytest.raises(KeyError):
        loader.get("walker", "missing")
    with pytest.raises(KeyError):
        loader.get("walker", "walk_steps", "deeper")


def test_invalid_values_surface_as_value_error(tmp_path):
    path = _write(tmp_path, "walker:\n  max_step_length: 0\n")

    with pytest.raises(ValueError):
        load_generation_params(ConfigLoader(path))
