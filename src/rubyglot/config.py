"""Configuration loading utilities for rubyglot."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_INT_KEYS = {"api_port", "workers"}
_FLOAT_KEYS = {"statistical_min_probability"}
_BOOL_KEYS = {"fallback_detector_enabled"}
_STR_KEYS = {"log_level", "api_host"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    statistical_min_probability: float
    fallback_detector_enabled: bool


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("RUBYGLOT_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int | float | bool] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 1,
        "statistical_min_probability": 0.5,
        "fallback_detector_enabled": True,
    }
    defaults.update(_load_profile(profile_path))

    log_level = os.getenv("RUBYGLOT_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("RUBYGLOT_API_HOST", str(defaults["api_host"]))
    api_port = _coerce_int("RUBYGLOT_API_PORT", os.getenv("RUBYGLOT_API_PORT", defaults["api_port"]))
    workers = _coerce_int("RUBYGLOT_WORKERS", os.getenv("RUBYGLOT_WORKERS", defaults["workers"]))
    min_probability = _coerce_float(
        "RUBYGLOT_STATISTICAL_MIN_PROBABILITY",
        os.getenv("RUBYGLOT_STATISTICAL_MIN_PROBABILITY", defaults["statistical_min_probability"]),
    )
    fallback_enabled = _coerce_bool(
        "RUBYGLOT_FALLBACK_DETECTOR_ENABLED",
        os.getenv("RUBYGLOT_FALLBACK_DETECTOR_ENABLED", defaults["fallback_detector_enabled"]),
    )
    if not 0.0 <= min_probability <= 1.0:
        raise ValueError(
            f"RUBYGLOT_STATISTICAL_MIN_PROBABILITY must be within [0, 1], got {min_probability!r}"
        )

    return AppConfig(
        env=env,
        log_level=log_level,
        api_host=api_host,
        api_port=api_port,
        workers=workers,
        statistical_min_probability=min_probability,
        fallback_detector_enabled=fallback_enabled,
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int | float | bool]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int | float | bool] = {}
    for key, raw in payload.items():
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key in _FLOAT_KEYS:
            resolved[key] = _coerce_float(key, raw)
        elif key in _BOOL_KEYS:
            resolved[key] = _coerce_bool(key, raw)
        elif key in _STR_KEYS:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_float(name: str, value: object) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got type bool")
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be a number, got {value!r}") from exc
    raise ValueError(f"{name} must be a number, got type {type(value).__name__}")


def _coerce_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().casefold()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    raise ValueError(f"{name} must be a boolean, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
