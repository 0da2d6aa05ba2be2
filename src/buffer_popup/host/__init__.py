"""Host boundary: protocols, pointer events and the popup controller."""

from .controller import BufferPopup, PopupRequest
from .events import PointerEvent, popup_position
from .protocol import (
    BlockingPopupHost,
    PopupHost,
    PopupRenderer,
    ScreenPosition,
    WindowTarget,
)

__all__ = [
    "BufferPopup",
    "PopupRequest",
    "PointerEvent",
    "popup_position",
    "BlockingPopupHost",
    "PopupHost",
    "PopupRenderer",
    "ScreenPosition",
    "WindowTarget",
]
