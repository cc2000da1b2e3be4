"""Configuration helpers for the social network analyzer."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"

# Load environment variables early so downstream modules can rely on them.
load_dotenv(ENV_PATH, override=False)

LEADER_THRESHOLD_ENV = "SOCNET_LEADER_THRESHOLD"
CENTRALITY_REACHABLE_ONLY_ENV = "SOCNET_CENTRALITY_REACHABLE_ONLY"
LOG_DIR_ENV = "SOCNET_LOG_DIR"

DEFAULT_LEADER_THRESHOLD = 0.3
DEFAULT_CENTRALITY_REACHABLE_ONLY = False
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AnalyticsSettings:
    """Tunables for the analytics layer."""

    leader_threshold: float = DEFAULT_LEADER_THRESHOLD
    centrality_reachable_only: bool = DEFAULT_CENTRALITY_REACHABLE_ONLY


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean (true/false); received '{raw}'.")


def get_analytics_settings() -> AnalyticsSettings:
    """Resolve analytics settings from the environment with sensible defaults."""

    raw_threshold = _get_env(LEADER_THRESHOLD_ENV)
    try:
        threshold = float(raw_threshold) if raw_threshold is not None else DEFAULT_LEADER_THRESHOLD
    except ValueError as exc:
        raise RuntimeError(
            f"{LEADER_THRESHOLD_ENV} must be a number; received '{raw_threshold}'."
        ) from exc
    if not 0.0 < threshold <= 1.0:
        raise RuntimeError(
            f"{LEADER_THRESHOLD_ENV} must be in (0, 1]; received '{raw_threshold}'."
        )

    raw_reachable = _get_env(CENTRALITY_REACHABLE_ONLY_ENV)
    reachable_only = (
        _parse_bool(CENTRALITY_REACHABLE_ONLY_ENV, raw_reachable)
        if raw_reachable is not None
        else DEFAULT_CENTRALITY_REACHABLE_ONLY
    )
    return AnalyticsSettings(leader_threshold=threshold, centrality_reachable_only=reachable_only)


def get_log_dir() -> Path:
    """Resolve the directory used for rotating log files."""

    raw_path = _get_env(LOG_DIR_ENV, str(DEFAULT_LOG_DIR))
    return Path(raw_path).expanduser().resolve()
