"""Assemble classified buffers into the popup ``MenuModel``."""

from __future__ import annotations

from operator import itemgetter
from typing import Dict, Sequence

from buffer_popup.config import PopupConfig
from buffer_popup.runtime.telemetry import span

from .classifier import classify
from .labels import format_label, max_name_length, placeholder_label
from .models import BufferInfo, Classification, MenuEntry, MenuModel
from .sorter import sort_buffers

NO_OTHER_BUFFERS = "No other buffers"
INTERNAL_SUBMENU = "Internal"

Keyed = Sequence[tuple[str, BufferInfo]]


def _keyed(group: str, buffers: Sequence[BufferInfo]) -> Keyed:
    # Keys come from the snapshot position, so equal names never collide.
    return [(f"{group}:{index}", buffer) for index, buffer in enumerate(buffers)]


def _sorted(keyed: Keyed, case_insensitive: bool) -> Keyed:
    return sort_buffers(keyed, case_insensitive, buffer_of=itemgetter(1))


def _items(
    keyed: Keyed,
    name_width: int,
    config: PopupConfig,
    lookup: Dict[str, BufferInfo],
) -> list[MenuEntry]:
    entries: list[MenuEntry] = []
    for key, buffer in keyed:
        lookup[key] = buffer
        entries.append(
            MenuEntry(
                kind="item", label=format_label(buffer, name_width, config), key=key
            )
        )
    return entries


def build_menu(
    classification: Classification,
    config: PopupConfig,
    *,
    logger_name: str | None = None,
) -> MenuModel:
    """Lay out recent, other and internal groups with separators.

    The returned model's lookup also covers the internal submenu, so a key
    chosen at either level resolves through the top-level model.
    """

    with span(
        "menu::build",
        logger_name=logger_name,
        component="menu",
        metadata={"column_mode": config.column_mode.value},
    ) as handle:
        case_insensitive = config.case_insensitive_sort
        name_width = max_name_length(classification.displayed())
        lookup: Dict[str, BufferInfo] = {}
        entries: list[MenuEntry] = []

        recent = _keyed("recent", classification.recent)
        entries.extend(_items(recent, name_width, config, lookup))
        if recent:
            entries.append(MenuEntry.separator())

        other = _sorted(_keyed("other", classification.other), case_insensitive)
        if other:
            entries.extend(_items(other, name_width, config, lookup))
        else:
            entries.append(
                MenuEntry(
                    kind="placeholder",
                    label=placeholder_label(NO_OTHER_BUFFERS, config),
                    enabled=False,
                )
            )

        # The classifier only fills this group under ``separate`` handling.
        if classification.internal:
            internal = _sorted(
                _keyed("internal", classification.internal), case_insensitive
            )
            sub_lookup: Dict[str, BufferInfo] = {}
            submenu = MenuModel(
                entries=tuple(_items(internal, name_width, config, sub_lookup)),
                lookup=sub_lookup,
            )
            lookup.update(sub_lookup)
            entries.append(MenuEntry.separator())
            entries.append(
                MenuEntry(
                    kind="submenu",
                    label=placeholder_label(INTERNAL_SUBMENU, config),
                    submenu=submenu,
                )
            )

        handle.add_metadata("entries", len(entries))
        handle.add_metadata("items", len(lookup))

    return MenuModel(entries=tuple(entries), lookup=lookup)


def plan_menu(
    buffers: Sequence[BufferInfo],
    config: PopupConfig,
    *,
    logger_name: str | None = None,
) -> MenuModel:
    """Classify ``buffers`` and build their menu in one step."""

    with span(
        "menu::plan",
        logger_name=logger_name,
        component="menu",
        metadata={"buffers": len(buffers)},
    ):
        classification = classify(buffers, config, logger_name=logger_name)
        return build_menu(classification, config, logger_name=logger_name)


__all__ = ["INTERNAL_SUBMENU", "NO_OTHER_BUFFERS", "build_menu", "plan_menu"]
