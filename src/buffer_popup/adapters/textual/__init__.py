"""Textual adapter; the demo app lives in ``app`` and imports textual lazily."""

from .controller import TextualBufferPopup, TextualPopupHooks

__all__ = ["TextualBufferPopup", "TextualPopupHooks"]
