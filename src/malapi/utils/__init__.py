"""Utility modules for malapi."""

from malapi.utils.config import CONFIG_DIR, CONFIG_FILE, resolve_setting

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "resolve_setting",
]
