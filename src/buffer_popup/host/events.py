"""Pointer events that open the popup."""

from __future__ import annotations

from dataclasses import dataclass

from buffer_popup.config import PopupConfig

from .protocol import ScreenPosition, WindowTarget


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Normalized mouse press: screen coordinates plus the clicked window."""

    x: int
    y: int
    target: WindowTarget


def popup_position(event: PointerEvent, config: PopupConfig) -> ScreenPosition:
    return (event.x, event.y - config.popup_y_offset)


__all__ = ["PointerEvent", "popup_position"]
