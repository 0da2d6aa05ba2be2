"""Configuration record consumed by every stage of the popup pipeline."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Optional


class ConfigurationError(ValueError):
    """Raised when a configuration value is missing, malformed or unsupported."""

    def __init__(self, message: str, *, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InternalHandling(str, Enum):
    """How buffers whose name starts with ``*`` are presented."""

    SEPARATE = "separate"
    NORMAL = "normal"
    HIDE = "hide"


class ColumnMode(str, Enum):
    """Layout used to place the file path next to the buffer name."""

    TAB = "tab"
    SPACES = "spaces"
    PARENTHESIS = "parenthesis"


def _coerce_enum(enum_type: type[Enum], name: str, value: Any) -> Any:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(
            f"{name} must be one of {choices}, got {value!r}",
            field=name,
            value=value,
        ) from None


def _check_limit(name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{name} must be a non-negative integer or None, got {value!r}",
            field=name,
            value=value,
        )
    if value < 0:
        raise ConfigurationError(
            f"{name} cannot be negative, got {value}", field=name, value=value
        )
    return value


@dataclass(frozen=True, slots=True)
class PopupConfig:
    """Immutable settings for one popup invocation.

    ``None`` in ``recent_count`` or ``max_filename_length`` means unlimited.
    ``max_filename_length=0`` turns path display off.
    """

    recent_count: Optional[int] = 5
    internal_handling: InternalHandling = InternalHandling.SEPARATE
    case_insensitive_sort: bool = True
    popup_y_offset: int = 0
    modified_tag: str = "*"
    unmodified_tag: str = " "
    max_filename_length: Optional[int] = None
    column_mode: ColumnMode = ColumnMode.SPACES

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "recent_count", _check_limit("recent_count", self.recent_count)
        )
        object.__setattr__(
            self,
            "max_filename_length",
            _check_limit("max_filename_length", self.max_filename_length),
        )
        object.__setattr__(
            self,
            "internal_handling",
            _coerce_enum(InternalHandling, "internal_handling", self.internal_handling),
        )
        object.__setattr__(
            self, "column_mode", _coerce_enum(ColumnMode, "column_mode", self.column_mode)
        )
        if isinstance(self.popup_y_offset, bool) or not isinstance(
            self.popup_y_offset, int
        ):
            raise ConfigurationError(
                f"popup_y_offset must be an integer, got {self.popup_y_offset!r}",
                field="popup_y_offset",
                value=self.popup_y_offset,
            )
        for name in ("modified_tag", "unmodified_tag"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {value!r}", field=name, value=value
                )

    @property
    def shows_paths(self) -> bool:
        return self.max_filename_length != 0

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


__all__ = [
    "ColumnMode",
    "ConfigurationError",
    "InternalHandling",
    "PopupConfig",
]
