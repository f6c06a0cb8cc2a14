"""Tests for the configuration module."""

import os
import tempfile

import pytest
import yaml

from sysline.config import (
    ConfigError,
    SyslineConfig,
    load_config,
)


def _write_yaml(data) -> str:
    with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as fh:
        yaml.dump(data, fh)
        return fh.name


def test_load_config_defaults():
    """No path means built-in defaults, no file access."""
    cfg = load_config()
    assert isinstance(cfg, SyslineConfig)
    assert cfg.sampler.interval_seconds == 1.0
    assert cfg.sampler.cpu is True
    assert cfg.sampler.memory is True
    assert cfg.sampler.disks is True
    assert cfg.sampler.process_io is True
    assert cfg.sampler.network is True
    assert cfg.logging.level == "WARNING"


def test_load_config_from_yaml():
    """Loading from a YAML file populates values."""
    path = _write_yaml({
        "sampler": {
            "interval_seconds": 5,
            "disk_io_policy": "FIRST",
            "network": False,
            "unknown_key": "ignored",
        },
        "logging": {"level": "debug"},
    })
    try:
        cfg = load_config(path)
        assert cfg.sampler.interval_seconds == 5.0
        assert isinstance(cfg.sampler.interval_seconds, float)
        assert not hasattr(cfg.sampler, "disk_io_policy")
        assert cfg.sampler.network is False
        assert cfg.sampler.cpu is True
        assert cfg.logging.level == "DEBUG"
    finally:
        os.unlink(path)


def test_empty_file_gives_defaults():
    with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as fh:
        path = fh.name
    try:
        assert load_config(path) == SyslineConfig()
    finally:
        os.unlink(path)


def test_missing_file_is_an_error():
    with pytest.raises(ConfigError, match="cannot read"):
        load_config("/tmp/nonexistent_sysline.yaml")


def test_invalid_yaml():
    with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as fh:
        fh.write("sampler: [unclosed\n")
        path = fh.name
    try:
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)
    finally:
        os.unlink(path)


@pytest.mark.parametrize(
    "data, message",
    [
        (["not", "a", "mapping"], "mapping at the top level"),
        ({"sampler": "fast"}, "must be a mapping"),
        ({"sampler": {"interval_seconds": "soon"}}, "interval_seconds"),
        ({"sampler": {"interval_seconds": float("inf")}}, "finite"),
        ({"sampler": {"interval_seconds": 1e10}}, "too large"),
        ({"logging": {"level": "LOUD"}}, "logging.level"),
    ],
)
def test_invalid_values(data, message):
    path = _write_yaml(data)
    try:
        with pytest.raises(ConfigError, match=message):
            load_config(path)
    finally:
        os.unlink(path)
