"""Callback-driven bridge between ``BufferPopup`` and Textual widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from buffer_popup.config import PopupConfig
from buffer_popup.host import (
    BufferPopup,
    PointerEvent,
    PopupRequest,
    ScreenPosition,
    WindowTarget,
)
from buffer_popup.menu import BufferInfo, MenuModel

ChoiceCallback = Callable[[Optional[str]], None]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualPopupHooks:
    """Callbacks the adapter uses to talk to the Textual app."""

    list_buffers: Callable[[], Sequence[BufferInfo]]
    show_menu: Callable[[MenuModel, ScreenPosition, ChoiceCallback], None]
    switch_buffer: Callable[[WindowTarget, BufferInfo], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualBufferPopup:
    """Acts as the ``PopupHost`` for a Textual app.

    Textual screens return their result through a callback, so the adapter
    only lists and activates buffers; clicks go through :meth:`handle_click`.
    """

    def __init__(
        self, hooks: TextualPopupHooks, config: Optional[PopupConfig] = None
    ) -> None:
        self.hooks = hooks
        self.controller = BufferPopup(self, config)

    @property
    def config(self) -> PopupConfig:
        return self.controller.config

    def handle_click(
        self, x: int, y: int, *, window: object = None, is_live_window: bool = True
    ) -> PopupRequest:
        event = PointerEvent(
            x=x, y=y, target=WindowTarget(window, is_live_window=is_live_window)
        )
        request = self.controller.prepare(event)
        self._log("popup ->", x=x, y=y, items=len(request.model.lookup))
        self.hooks.show_menu(
            request.model,
            request.position,
            lambda key: self.handle_choice(request, key),
        )
        return request

    def handle_choice(
        self, request: PopupRequest, key: Optional[str]
    ) -> Optional[BufferInfo]:
        buffer = self.controller.complete(request, key)
        if buffer is None:
            self.hooks.update_status("popup::cancel")
        else:
            self.hooks.update_status(f"buffer::{buffer.name}")
        self._log("choice <-", key=key, buffer=buffer.name if buffer else None)
        return buffer

    # PopupHost
    def list_open_buffers(self) -> Sequence[BufferInfo]:
        return self.hooks.list_buffers()

    def activate_buffer(self, target: WindowTarget, buffer: BufferInfo) -> None:
        self.hooks.switch_buffer(target, buffer)

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items())
        self.hooks.log(" ".join(parts))


__all__ = ["TextualBufferPopup", "TextualPopupHooks"]
