"""Configuration loading and validation for bullet lint thresholds."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .domain.bullet_format import MAX_BULLET_LENGTH, WARNING_BULLET_LENGTH, LengthThresholds

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"
LOCAL_CONFIG_PATH = "config/config.local.yaml"

ENV_WARNING_LENGTH = "RESUME_BULLETS_WARNING_LENGTH"
ENV_MAX_LENGTH = "RESUME_BULLETS_MAX_LENGTH"


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


class ConfigurationError(ValueError):
    """Raised when a loaded configuration fails validation."""

    def __init__(self, issues: List[ConfigError]):
        self.issues = issues
        details = "; ".join(f"{e.field}: {e.message}" for e in issues if e.severity == Severity.ERROR)
        super().__init__(f"Invalid configuration: {details}")


@dataclass
class LintConfig:
    """Bullet lint settings."""
    warning_length: int = WARNING_BULLET_LENGTH
    max_length: int = MAX_BULLET_LENGTH
    strict_scope: bool = True

    @property
    def thresholds(self) -> LengthThresholds:
        return LengthThresholds(warning=self.warning_length, max=self.max_length)


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML (env overrides already applied)

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []
    bullets = raw_config.get("bullets", {})
    if not isinstance(bullets, dict):
        return [ConfigError(field="bullets", message="bullets must be a mapping", severity=Severity.ERROR)]

    # --- Lengths ---
    warning_length = bullets.get("warning_length", WARNING_BULLET_LENGTH)
    max_length = bullets.get("max_length", MAX_BULLET_LENGTH)
    for name, value in (("warning_length", warning_length), ("max_length", max_length)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(ConfigError(
                field=f"bullets.{name}",
                message=f"{name} must be a positive integer, got {value!r}",
                severity=Severity.ERROR,
            ))

    if not errors and warning_length >= max_length:
        errors.append(ConfigError(
            field="bullets.warning_length",
            message=f"warning_length ({warning_length}) must be smaller than max_length ({max_length})",
            severity=Severity.ERROR,
        ))

    # --- Scope ---
    strict_scope = bullets.get("strict_scope", True)
    if not isinstance(strict_scope, bool):
        errors.append(ConfigError(
            field="bullets.strict_scope",
            message=f"strict_scope must be true or false, got {strict_scope!r}",
            severity=Severity.ERROR,
        ))

    known = {"warning_length", "max_length", "strict_scope"}
    for key in sorted(set(bullets) - known):
        errors.append(ConfigError(
            field=f"bullets.{key}",
            message=f"Unknown setting {key!r} is ignored",
            severity=Severity.WARNING,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)


def load_raw_config(config_path: str = LOCAL_CONFIG_PATH) -> dict:
    """Load raw config data with local overlay support.

    Lookup order for the default path:
    1. config.local.yaml (developer overrides)
    2. config.yaml (checked-in defaults)

    Missing default files yield an empty mapping; an explicit path that
    does not exist raises ``FileNotFoundError``.
    """
    repo_root = Path(__file__).resolve().parents[1]

    def _resolve(candidate: str) -> Path:
        path = Path(candidate)
        if path.exists():
            return path
        alt = repo_root / candidate
        if alt.exists():
            return alt
        return path

    def _load_yaml(path: Path) -> dict:
        if not path.exists():
            return {}
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file must be a mapping: {path}")
            return data

    def _deep_merge(base: dict, override: dict) -> dict:
        merged = dict(base)
        for key, value in override.items():
            base_value = merged.get(key)
            if isinstance(base_value, dict) and isinstance(value, dict):
                merged[key] = _deep_merge(base_value, value)
            else:
                merged[key] = value
        return merged

    target = _resolve(config_path)
    if Path(config_path).name == "config.local.yaml":
        base = _load_yaml(_resolve(DEFAULT_CONFIG_PATH))
        return _deep_merge(base, _load_yaml(target))

    if not target.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return _load_yaml(target)


def apply_env_overrides(raw_config: dict) -> dict:
    """Overlay threshold env vars on *raw_config* (returns a new dict)."""
    merged = dict(raw_config)
    bullets = dict(merged.get("bullets") or {})
    for env_name, key in ((ENV_WARNING_LENGTH, "warning_length"), (ENV_MAX_LENGTH, "max_length")):
        value = os.environ.get(env_name, "").strip()
        if not value:
            continue
        try:
            bullets[key] = int(value)
        except ValueError:
            bullets[key] = value
        logger.debug("Using %s=%s from environment", env_name, value)
    merged["bullets"] = bullets
    return merged


def load_config(config_path: str = LOCAL_CONFIG_PATH) -> LintConfig:
    """Load and validate bullet lint configuration."""
    raw = apply_env_overrides(load_raw_config(config_path))
    issues = validate_config(raw)
    for issue in issues:
        if issue.severity == Severity.WARNING:
            logger.warning("Config %s: %s", issue.field, issue.message)
    if has_errors(issues):
        raise ConfigurationError(issues)

    bullets = raw.get("bullets", {})
    return LintConfig(
        warning_length=bullets.get("warning_length", WARNING_BULLET_LENGTH),
        max_length=bullets.get("max_length", MAX_BULLET_LENGTH),
        strict_scope=bullets.get("strict_scope", True),
    )
