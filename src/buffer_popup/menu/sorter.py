"""Alphabetical ordering for the ``other`` and ``internal`` groups."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from .models import BufferInfo

T = TypeVar("T")
SortKey = Callable[[BufferInfo], tuple[int, str]]


def sort_key(case_insensitive: bool) -> SortKey:
    """Key placing internal buffers after normal ones, then by name."""

    if case_insensitive:
        return lambda buffer: (int(buffer.is_internal), buffer.name.casefold())
    return lambda buffer: (int(buffer.is_internal), buffer.name)


def sort_buffers(
    items: Iterable[T],
    case_insensitive: bool = False,
    *,
    buffer_of: Optional[Callable[[T], BufferInfo]] = None,
) -> tuple[T, ...]:
    """Sort buffers, or records carrying one when ``buffer_of`` is given."""

    key = sort_key(case_insensitive)
    if buffer_of is not None:
        extract = buffer_of
        # sorted() is stable, so names equal under casefold keep input order.
        return tuple(sorted(items, key=lambda item: key(extract(item))))
    return tuple(sorted(items, key=key))  # type: ignore[arg-type]


__all__ = ["SortKey", "sort_buffers", "sort_key"]
