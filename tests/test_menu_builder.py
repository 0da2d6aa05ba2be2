from __future__ import annotations

import pytest

from buffer_popup.config import PopupConfig
from buffer_popup.menu import (
    BufferInfo,
    build_menu,
    classify,
    plan_menu,
)


def make_config(**overrides: object) -> PopupConfig:
    values: dict[str, object] = {"modified_tag": "*", "unmodified_tag": " "}
    values.update(overrides)
    return PopupConfig(**values)  # type: ignore[arg-type]


def sample_buffers() -> list[BufferInfo]:
    return [
        BufferInfo("foo.txt", "/a/foo.txt", modified=True),
        BufferInfo("*scratch*"),
        BufferInfo("bar.txt", "/b/bar.txt"),
    ]


def test_plan_menu_worked_example_layout() -> None:
    config = make_config(recent_count=1, column_mode="parenthesis")

    model = plan_menu(sample_buffers(), config)

    assert [entry.kind for entry in model.entries] == [
        "item",
        "separator",
        "item",
        "separator",
        "submenu",
    ]
    assert model.entries[0].label == "*  foo.txt (/a/foo.txt)"
    assert model.entries[2].label == "   bar.txt (/b/bar.txt)"
    assert model.entries[4].label == "   Internal"
    submenu = model.submenu
    assert submenu is not None
    assert submenu.labels() == ("   *scratch* ()",)


def test_submenu_keys_resolve_through_top_level_model() -> None:
    model = plan_menu(sample_buffers(), make_config(recent_count=1))
    submenu = model.submenu
    assert submenu is not None

    key = submenu.entries[0].key

    assert submenu.resolve(key) is model.resolve(key)
    assert model.resolve(key).name == "*scratch*"


def test_placeholder_when_other_group_is_empty() -> None:
    buffers = [BufferInfo("a.py", "/a.py"), BufferInfo("b.py", "/b.py")]

    model = plan_menu(buffers, make_config(recent_count=None, max_filename_length=0))

    assert model.labels() == ("   a.py", "   b.py", "", "   No other buffers")
    placeholder = model.entries[-1]
    assert placeholder.kind == "placeholder"
    assert placeholder.enabled is False
    assert placeholder.selectable is False


def test_empty_snapshot_only_shows_placeholder() -> None:
    model = plan_menu([], make_config())

    assert [entry.kind for entry in model.entries] == ["placeholder"]
    assert len(model.lookup) == 0


def test_no_separator_without_recent_group() -> None:
    buffers = [BufferInfo("b"), BufferInfo("a")]

    model = plan_menu(buffers, make_config(recent_count=0, max_filename_length=0))

    assert model.labels() == ("   a", "   b")


def test_other_group_is_sorted_but_recent_is_not() -> None:
    buffers = [BufferInfo(name) for name in ("zulu", "alpha", "yankee", "bravo")]

    model = plan_menu(buffers, make_config(recent_count=2, max_filename_length=0))

    assert model.labels() == ("   zulu", "   alpha", "", "   bravo", "   yankee")


def test_normal_handling_sorts_internal_after_regular_buffers() -> None:
    buffers = [BufferInfo(name) for name in ("*log*", "b", "a")]

    model = plan_menu(
        buffers,
        make_config(
            recent_count=0, internal_handling="normal", max_filename_length=0
        ),
    )

    assert model.labels() == ("   a", "   b", "   *log*")
    assert model.submenu is None


def test_spaces_width_covers_internal_names() -> None:
    buffers = [BufferInfo("a", "/a"), BufferInfo("*very-long-name*")]
    config = make_config(recent_count=0, column_mode="spaces")

    model = build_menu(classify(buffers, config), config)

    label = model.entries[0].label
    assert label == "   a" + " " * (len("*very-long-name*") - 1) + "  /a"


def test_duplicate_names_get_distinct_keys() -> None:
    first = BufferInfo("dup", "/one/dup", handle=object())
    second = BufferInfo("dup", "/two/dup", handle=object())

    model = plan_menu([first, second], make_config(recent_count=1))

    keys = [entry.key for entry in model.iter_items()]
    assert len(set(keys)) == 2
    assert model.resolve(keys[0]) is first
    assert model.resolve(keys[1]) is second


def test_resolve_unknown_or_missing_key_returns_none() -> None:
    model = plan_menu(sample_buffers(), make_config())

    assert model.resolve(None) is None
    assert model.resolve("other:99") is None


@pytest.mark.parametrize("handling", ["separate", "normal", "hide"])
@pytest.mark.parametrize("recent_count", [0, 2, None])
def test_every_visible_buffer_appears_once_in_flattened_menu(
    handling: str, recent_count: int | None
) -> None:
    buffers = [
        BufferInfo("*Messages*"),
        BufferInfo("main.py", "/src/main.py", modified=True),
        BufferInfo(" *minibuf*"),
        BufferInfo("README", "/README"),
        BufferInfo("*scratch*"),
        BufferInfo("util.py", "/src/util.py"),
    ]
    config = make_config(recent_count=recent_count, internal_handling=handling)

    model = plan_menu(buffers, config)

    shown = [model.resolve(entry.key) for entry in model.iter_items()]
    expected = [
        buffer
        for buffer in buffers
        if not buffer.is_hidden and not (handling == "hide" and buffer.is_internal)
    ]
    assert len(shown) == len(expected)
    assert all(any(s is e for s in shown) for e in expected)


def test_case_sensitive_sort_reaches_menu() -> None:
    buffers = [BufferInfo(name) for name in ("b", "B", "a")]

    model = plan_menu(
        buffers,
        make_config(recent_count=0, case_insensitive_sort=False, max_filename_length=0),
    )

    assert model.labels() == ("   B", "   a", "   b")


def test_case_insensitive_sort_reaches_menu() -> None:
    buffers = [BufferInfo(name) for name in ("b", "B", "a")]

    model = plan_menu(
        buffers,
        make_config(recent_count=0, case_insensitive_sort=True, max_filename_length=0),
    )

    assert model.labels() == ("   a", "   b", "   B")
