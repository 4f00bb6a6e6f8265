"""Config utility for persistent malapi settings.

Settings live in ``$XDG_CONFIG_HOME/malapi/config.toml`` (``~/.config`` when
unset) and are read with tomli. Any dotted key can be overridden through an
environment variable, e.g. ``features.forum`` -> ``MALAPI_FEATURES_FORUM``.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "malapi"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "MALAPI_"
_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:  # noqa: ANN401
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="features.forum" will attempt
    ``data["features"]["forum"]`` returning None if any level is missing.
    """
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "features.forum" -> "MALAPI_FEATURES_FORUM".
    """
    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:  # noqa: ANN401
    """Coerce *raw* (from env or TOML) to the type of *default*."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            return cast(T, raw.strip().lower() in _TRUTHY)
        if isinstance(raw, int):
            return cast(T, raw != 0)
        return default
    if isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(raw))
        return default
    if isinstance(default, float):
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cast(T, float(raw))
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(raw))
        return default
    return cast(T, raw)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"features.forum"`` or ``"cli.limit"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from a CLI option (``None`` when not provided).

    Returns:
        The resolved value, coerced to the type of *default* where possible.
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default
