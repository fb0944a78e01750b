"""Configuration loader for word-select grading.

Provides centralized access to grading defaults (delimiters, penalty,
state tolerance and user-facing messages).
"""
from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Optional
import structlog

logger = structlog.get_logger(__name__)

CONFIG_FILE = Path(__file__).parent / "grading_config.yaml"


class ConfigLoader:
    """Process-wide view of ``grading_config.yaml``."""

    _instance: Optional[ConfigLoader] = None
    _config: Optional[dict[str, Any]] = None

    def __new__(cls) -> ConfigLoader:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._config is None:
            self._load_config()

    def _load_config(self) -> None:
        if not CONFIG_FILE.exists():
            logger.warning("config_file_not_found", path=str(CONFIG_FILE))
            self._config = {}
            return
        with open(CONFIG_FILE) as f:
            self._config = yaml.safe_load(f) or {}
        logger.info("config_loaded", path=str(CONFIG_FILE))

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``grading.penalty``.

        Returns ``default`` when any segment is missing or null.
        """
        node: Any = self._config or {}
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def reload(self) -> None:
        """Re-read the file, e.g. after ``CONFIG_FILE`` is pointed elsewhere."""
        self._config = None
        self._load_config()


# Singleton instance
_config = ConfigLoader()


def get_config() -> ConfigLoader:
    """Get the global config instance."""
    return _config


def get_default_delimiters() -> str:
    """Get the two-character delimiter string, left then right."""
    return str(_config.get("delimiters.default", "[]"))


def get_default_penalty() -> float:
    """Get the per-attempt penalty used when a question does not set one."""
    return float(_config.get("grading.penalty", 0.3333333))


def get_state_tolerance() -> float:
    """Get the tolerance used when mapping a fraction to a graded state."""
    return float(_config.get("grading.state_tolerance", 0.000001))


def get_message(key: str, default: str = "") -> str:
    """Get a user-facing message by key."""
    return str(_config.get(f"messages.{key}", default))
