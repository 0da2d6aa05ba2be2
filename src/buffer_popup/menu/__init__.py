"""Pure pipeline turning a buffer snapshot into a popup menu model."""

from .builder import INTERNAL_SUBMENU, NO_OTHER_BUFFERS, build_menu, plan_menu
from .classifier import classify
from .labels import display_path, format_label, max_name_length
from .models import BufferInfo, Classification, MenuEntry, MenuModel
from .sorter import sort_buffers, sort_key

__all__ = [
    "BufferInfo",
    "Classification",
    "MenuEntry",
    "MenuModel",
    "classify",
    "sort_buffers",
    "sort_key",
    "display_path",
    "format_label",
    "max_name_length",
    "build_menu",
    "plan_menu",
    "INTERNAL_SUBMENU",
    "NO_OTHER_BUFFERS",
]
