"""Split the host's MRU-ordered buffer list into recent, internal and other."""

from __future__ import annotations

from typing import Iterable

from buffer_popup.config import InternalHandling, PopupConfig
from buffer_popup.runtime.telemetry import span

from .models import BufferInfo, Classification


def classify(
    buffers: Iterable[BufferInfo],
    config: PopupConfig,
    *,
    logger_name: str | None = None,
) -> Classification:
    """Partition ``buffers`` in a single pass.

    ``buffers`` must already be in most-recently-used order. Internal buffers
    under ``separate`` handling never take a recent slot.
    """

    handling = config.internal_handling
    limit = config.recent_count
    recent: list[BufferInfo] = []
    internal: list[BufferInfo] = []
    other: list[BufferInfo] = []

    with span(
        "menu::classify",
        logger_name=logger_name,
        component="menu",
        metadata={"handling": handling.value, "recent_count": limit},
    ) as handle:
        skipped = 0
        for buffer in buffers:
            if buffer.is_hidden or (
                handling is InternalHandling.HIDE and buffer.is_internal
            ):
                skipped += 1
                continue
            if handling is InternalHandling.SEPARATE and buffer.is_internal:
                internal.append(buffer)
            elif limit is None or len(recent) < limit:
                recent.append(buffer)
            else:
                other.append(buffer)

        handle.add_metadata("skipped", skipped)
        handle.add_metadata(
            "groups", f"{len(recent)}/{len(other)}/{len(internal)}"
        )

    return Classification(
        recent=tuple(recent), internal=tuple(internal), other=tuple(other)
    )


__all__ = ["classify"]
