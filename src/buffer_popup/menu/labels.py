"""Turn buffer snapshots into menu labels.

A label is ``<tag>  <name>`` optionally followed by the file path, laid out
according to :class:`~buffer_popup.config.ColumnMode`:

``tab``          ``name<TAB>path``
``spaces``       ``name`` padded to the longest displayed name, two spaces, path
``parenthesis``  ``name (path)``; buffers without a file render ``name ()``

The ``spaces`` layout only lines up when the menu uses a fixed-width font.
Long paths keep their last ``max_filename_length`` characters behind
``...``, even when that cuts through a directory name.
"""

from __future__ import annotations

from typing import Iterable, Optional

from buffer_popup.config import ColumnMode, PopupConfig

from .models import BufferInfo

ELLIPSIS = "..."
TAG_GAP = "  "


def tag_for(buffer: BufferInfo, config: PopupConfig) -> str:
    return config.modified_tag if buffer.is_modified else config.unmodified_tag


def display_path(file_path: Optional[str], max_length: Optional[int]) -> str:
    if not file_path:
        return ""
    if max_length is not None and len(file_path) > max_length:
        return ELLIPSIS + file_path[-max_length:] if max_length else ELLIPSIS
    return file_path


def max_name_length(buffers: Iterable[BufferInfo]) -> int:
    return max((len(buffer.name) for buffer in buffers), default=0)


def format_label(buffer: BufferInfo, name_width: int, config: PopupConfig) -> str:
    """Format one menu label; ``name_width`` only matters for ``spaces``."""

    tag = tag_for(buffer, config)
    if not config.shows_paths:
        return f"{tag}{TAG_GAP}{buffer.name}"

    path = display_path(buffer.file_path, config.max_filename_length)
    mode = config.column_mode
    if mode is ColumnMode.TAB:
        body = f"{buffer.name}\t{path}"
    elif mode is ColumnMode.SPACES:
        body = f"{buffer.name.ljust(name_width)}  {path}"
    elif mode is ColumnMode.PARENTHESIS:
        body = f"{buffer.name} ({path})"
    else:  # pragma: no cover - PopupConfig rejects unknown modes
        raise ValueError(f"Unsupported column mode {mode!r}")
    return f"{tag}{TAG_GAP}{body}"


def placeholder_label(text: str, config: PopupConfig) -> str:
    return f"{config.unmodified_tag}{TAG_GAP}{text}"


__all__ = [
    "ELLIPSIS",
    "display_path",
    "format_label",
    "max_name_length",
    "placeholder_label",
    "tag_for",
]
