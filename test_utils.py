"""Tests for size metrics and configuration loading."""

from pathlib import Path

import pytest

from snapfix.utils.config import DEFAULT_CONFIG, load_config
from snapfix.utils.metrics import compression_factor, format_factor


def test_compression_factor():
    assert compression_factor(10000, 2500) == 4.0
    assert compression_factor(13, 15) == pytest.approx(13 / 15)
    assert compression_factor(0, 1) == 0.0


def test_compression_factor_zero_compressed_size():
    assert compression_factor(0, 0) is None
    assert compression_factor(10, 0) is None


def test_format_factor():
    assert format_factor(4.0) == "4.00x"
    assert format_factor(None) == "n/a"


def test_default_config_is_a_copy():
    config = load_config()
    config['fixtures']['extension'] = 'changed'
    assert DEFAULT_CONFIG['fixtures']['extension'] == 'snappy'
    assert load_config()['fixtures']['extension'] == 'snappy'


def test_yaml_overrides_merge_with_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fixtures:\n  output_dir: Tests/TestData\nextra:\n  key: 1\n")

    config = load_config(path)

    assert config['fixtures']['output_dir'] == 'Tests/TestData'
    assert config['fixtures']['extension'] == 'snappy'
    assert config['extra'] == {'key': 1}


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_non_mapping_yaml_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_shipped_config_matches_defaults():
    assert load_config(Path(__file__).parent / "configs" / "fixtures.yaml") == DEFAULT_CONFIG
