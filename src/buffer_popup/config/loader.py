"""Build a validated ``PopupConfig`` from mappings and environment variables."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from buffer_popup.runtime.telemetry import record_event

from .models import ConfigurationError, PopupConfig

ENV_PREFIX = "BUFFER_POPUP_"

_UNLIMITED = {"", "none", "unlimited", "nil"}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_limit(name: str, raw: str) -> Optional[int]:
    text = raw.strip().lower()
    if text in _UNLIMITED:
        return None
    try:
        return int(text)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer or 'unlimited', got {raw!r}",
            field=name,
            value=raw,
        ) from None


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}", field=name, value=raw
        ) from None


def _parse_flag(name: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean flag, got {raw!r}", field=name, value=raw
    )


def _keep(_name: str, raw: str) -> str:
    return raw


_ENV_PARSERS: Dict[str, Callable[[str, str], Any]] = {
    "recent_count": _parse_limit,
    "internal_handling": _keep,
    "case_insensitive_sort": _parse_flag,
    "popup_y_offset": _parse_int,
    "modified_tag": _keep,
    "unmodified_tag": _keep,
    "max_filename_length": _parse_limit,
    "column_mode": _keep,
}


def _mapping_value(name: str, value: Any) -> Any:
    # Mappings from TOML/JSON may spell "unlimited" for the limit fields.
    if isinstance(value, str) and name in {"recent_count", "max_filename_length"}:
        return _parse_limit(name, value)
    if isinstance(value, str) and name == "case_insensitive_sort":
        return _parse_flag(name, value)
    if isinstance(value, str) and name == "popup_y_offset":
        return _parse_int(name, value)
    return value


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect ``BUFFER_POPUP_*`` overrides keyed by config field name."""

    source = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for name, parser in _ENV_PARSERS.items():
        raw = source.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            overrides[name] = parser(name, raw)
    return overrides


def load_config(
    mapping: Optional[Mapping[str, Any]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    base: Optional[PopupConfig] = None,
) -> PopupConfig:
    """Return defaults updated by ``mapping`` and then by the environment.

    All validation happens here so an invalid value fails before any popup is
    shown.
    """

    known = set(PopupConfig.field_names())
    values: Dict[str, Any] = {}
    for key, value in (mapping or {}).items():
        name = str(key).replace("-", "_")
        if name not in known:
            raise ConfigurationError(f"Unknown setting '{key}'", field=str(key))
        values[name] = _mapping_value(name, value)
    values.update(env_overrides(environ))

    config = replace(base or PopupConfig(), **values)
    record_event(
        "config.loaded",
        level="debug",
        data={"overrides": ",".join(sorted(values)) or "-"},
    )
    return config


__all__ = ["ENV_PREFIX", "env_overrides", "load_config"]
