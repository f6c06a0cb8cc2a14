"""Configuration loading and validation for sysline."""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when a settings file cannot be read or is malformed."""


@dataclass
class SamplerConfig:
    """Probe and sampling settings."""

    interval_seconds: float = 1.0
    cpu: bool = True
    memory: bool = True
    disks: bool = True
    process_io: bool = True
    network: bool = True


@dataclass
class LoggingConfig:
    """Diagnostic logging settings (always written to stderr)."""

    level: str = "WARNING"


@dataclass
class SyslineConfig:
    """Top-level sysline configuration."""

    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"section {key!r} must be a mapping, got {type(value).__name__}")
    return value


def _dict_to_config(data: dict[str, Any]) -> SyslineConfig:
    """Convert a raw dictionary to a SyslineConfig dataclass."""
    sampler_data = _section(data, "sampler")
    logging_data = _section(data, "logging")

    cfg = SyslineConfig(
        sampler=SamplerConfig(**{
            k: v for k, v in sampler_data.items()
            if k in SamplerConfig.__dataclass_fields__
        }),
        logging=LoggingConfig(**{
            k: v for k, v in logging_data.items()
            if k in LoggingConfig.__dataclass_fields__
        }),
    )
    _validate(cfg)
    return cfg


def _validate(cfg: SyslineConfig) -> None:
    sampler = cfg.sampler
    try:
        sampler.interval_seconds = float(sampler.interval_seconds)
    except (TypeError, ValueError):
        raise ConfigError(f"sampler.interval_seconds must be a number, got {sampler.interval_seconds!r}") from None
    if not math.isfinite(sampler.interval_seconds):
        raise ConfigError("sampler.interval_seconds must be finite")
    if sampler.interval_seconds > threading.TIMEOUT_MAX:
        raise ConfigError("sampler.interval_seconds is too large")

    level = str(cfg.logging.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"logging.level is not a known level: {cfg.logging.level!r}")
    cfg.logging.level = level


def load_config(path: str | Path | None = None) -> SyslineConfig:
    """Load configuration from an optional YAML settings file.

    With *path* None no file is read and the built-in defaults apply.
    """
    if path is None:
        return _dict_to_config({})

    path = Path(path)
    try:
        with open(path, encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return _dict_to_config(loaded)
