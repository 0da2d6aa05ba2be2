"""Dataclasses describing buffer snapshots and the menu handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Literal, Mapping, Optional

INTERNAL_PREFIX = "*"
HIDDEN_PREFIX = " "

EntryKind = Literal["item", "separator", "placeholder", "submenu"]


@dataclass(frozen=True, slots=True)
class BufferInfo:
    """Read-only snapshot of one open buffer as reported by the host."""

    name: str
    file_path: Optional[str] = None
    modified: bool = False
    handle: object | None = field(default=None, compare=False, repr=False)

    @property
    def is_internal(self) -> bool:
        return self.name.startswith(INTERNAL_PREFIX)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(HIDDEN_PREFIX)

    @property
    def is_modified(self) -> bool:
        # Buffers without a file are never tagged as modified.
        return self.modified and bool(self.file_path)


@dataclass(frozen=True, slots=True)
class Classification:
    """Buffers split into the three menu groups."""

    recent: tuple[BufferInfo, ...] = ()
    internal: tuple[BufferInfo, ...] = ()
    other: tuple[BufferInfo, ...] = ()

    def displayed(self) -> Iterator[BufferInfo]:
        yield from self.recent
        yield from self.other
        yield from self.internal

    def __len__(self) -> int:
        return len(self.recent) + len(self.internal) + len(self.other)


@dataclass(frozen=True, slots=True)
class MenuEntry:
    """One row of a popup menu.

    ``key`` is only set for ``item`` entries; ``submenu`` entries carry the
    nested model instead.
    """

    kind: EntryKind
    label: str = ""
    key: Optional[str] = None
    enabled: bool = True
    submenu: Optional["MenuModel"] = None

    @property
    def selectable(self) -> bool:
        return self.kind == "item" and self.enabled and self.key is not None

    @classmethod
    def separator(cls) -> "MenuEntry":
        return cls(kind="separator", enabled=False)


@dataclass(frozen=True, slots=True)
class MenuModel:
    """Ordered menu entries plus the key -> buffer table used on selection."""

    entries: tuple[MenuEntry, ...] = ()
    lookup: Mapping[str, BufferInfo] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lookup", MappingProxyType(dict(self.lookup)))

    def resolve(self, key: Optional[str]) -> Optional[BufferInfo]:
        if key is None:
            return None
        return self.lookup.get(key)

    def iter_items(self) -> Iterator[MenuEntry]:
        """Yield buffer entries in display order, descending into submenus."""

        for entry in self.entries:
            if entry.kind == "item":
                yield entry
            elif entry.kind == "submenu" and entry.submenu is not None:
                yield from entry.submenu.iter_items()

    def labels(self) -> tuple[str, ...]:
        return tuple(entry.label for entry in self.entries)

    @property
    def submenu(self) -> Optional["MenuModel"]:
        for entry in self.entries:
            if entry.kind == "submenu":
                return entry.submenu
        return None


__all__ = [
    "BufferInfo",
    "Classification",
    "EntryKind",
    "MenuEntry",
    "MenuModel",
    "INTERNAL_PREFIX",
    "HIDDEN_PREFIX",
]
