"""Controller wiring the pure menu pipeline to a ``PopupHost``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from buffer_popup.config import PopupConfig
from buffer_popup.menu import BufferInfo, MenuModel, plan_menu
from buffer_popup.runtime.telemetry import record_event, span

from .events import PointerEvent, popup_position
from .protocol import PopupHost, PopupRenderer, ScreenPosition, WindowTarget


@dataclass(frozen=True, slots=True)
class PopupRequest:
    """Everything a renderer needs to show one popup."""

    model: MenuModel
    position: ScreenPosition
    target: WindowTarget


class BufferPopup:
    """Runs one popup invocation per pointer event.

    Hosts that can render and wait call :meth:`popup`. Callback-driven UIs call
    :meth:`prepare`, render the request themselves and hand the chosen key to
    :meth:`complete`.
    """

    def __init__(
        self,
        host: PopupHost,
        config: Optional[PopupConfig] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.config = config or PopupConfig()
        self._logger_name = logger_name

    def prepare(self, event: PointerEvent) -> PopupRequest:
        buffers = tuple(self.host.list_open_buffers())
        model = plan_menu(buffers, self.config, logger_name=self._logger_name)
        return PopupRequest(
            model=model,
            position=popup_position(event, self.config),
            target=event.target,
        )

    def complete(
        self, request: PopupRequest, key: Optional[str]
    ) -> Optional[BufferInfo]:
        """Switch to the buffer behind ``key``; None means the user cancelled."""

        if key is None:
            record_event("popup.cancel", level="debug", logger_name=self._logger_name)
            return None

        buffer = request.model.resolve(key)
        if buffer is None:
            record_event(
                "popup.unknown_key",
                level="warning",
                data={"key": key},
                logger_name=self._logger_name,
            )
            return None

        with span(
            "popup::activate",
            logger_name=self._logger_name,
            component="popup",
            metadata={"buffer": buffer.name, "frame": not request.target.is_live_window},
        ):
            self.host.activate_buffer(request.target, buffer)
        record_event(
            "popup.select",
            data={"buffer": buffer.name, "key": key},
            logger_name=self._logger_name,
        )
        return buffer

    def popup(
        self, event: PointerEvent, renderer: Optional[PopupRenderer] = None
    ) -> Optional[BufferInfo]:
        """Prepare, show and complete in one call.

        ``renderer`` defaults to the host, which must then implement
        ``show_popup``.
        """

        if renderer is None:
            if not isinstance(self.host, PopupRenderer):
                raise TypeError(
                    f"{type(self.host).__name__} cannot show popups; pass a renderer "
                    "or use prepare() and complete()"
                )
            renderer = self.host
        request = self.prepare(event)
        key = renderer.show_popup(request.model, request.position)
        return self.complete(request, key)


__all__ = ["BufferPopup", "PopupRequest"]
