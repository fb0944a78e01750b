"""Configuration access for the grading core."""
from wordselect.config.loader import (
    ConfigLoader,
    get_config,
    get_default_delimiters,
    get_default_penalty,
    get_message,
    get_state_tolerance,
)

__all__ = [
    "ConfigLoader",
    "get_config",
    "get_default_delimiters",
    "get_default_penalty",
    "get_message",
    "get_state_tolerance",
]
