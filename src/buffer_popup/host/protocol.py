"""Boundary types describing what the host editor provides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable

from buffer_popup.menu import BufferInfo, MenuModel

ScreenPosition = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class WindowTarget:
    """Window the chosen buffer should be shown in.

    ``is_live_window`` is False when the click landed on something that only
    identifies a frame; hosts then select the frame rather than a window.
    """

    window: object
    is_live_window: bool = True


class PopupHost(Protocol):
    """Buffer services every host exposes to the popup controller."""

    def list_open_buffers(self) -> Sequence[BufferInfo]:
        """Open buffers, most recently used first, current buffer excluded."""
        ...

    def activate_buffer(self, target: WindowTarget, buffer: BufferInfo) -> None:
        """Show ``buffer`` in ``target`` (or select its frame)."""
        ...


@runtime_checkable
class PopupRenderer(Protocol):
    """Blocking menu display used by ``BufferPopup.popup``."""

    def show_popup(
        self, model: MenuModel, position: ScreenPosition
    ) -> Optional[str]:
        """Display ``model`` and return the chosen entry key, or None on cancel."""
        ...


class BlockingPopupHost(PopupHost, PopupRenderer, Protocol):
    """Host that can also render the menu and wait for the choice."""


__all__ = [
    "BlockingPopupHost",
    "PopupHost",
    "PopupRenderer",
    "ScreenPosition",
    "WindowTarget",
]
