from __future__ import annotations

import pytest

from buffer_popup.config import InternalHandling, PopupConfig
from buffer_popup.menu import BufferInfo, classify


def make_buffers(*names: str) -> list[BufferInfo]:
    return [BufferInfo(name=name, file_path=f"/src/{name}") for name in names]


def names(buffers) -> list[str]:
    return [buffer.name for buffer in buffers]


def test_classify_mixed_buffers_into_three_groups() -> None:
    buffers = [
        BufferInfo("foo.txt", "/a/foo.txt", modified=True),
        BufferInfo("*scratch*"),
        BufferInfo("bar.txt", "/b/bar.txt"),
    ]
    config = PopupConfig(recent_count=1, internal_handling="separate")

    result = classify(buffers, config)

    assert names(result.recent) == ["foo.txt"]
    assert names(result.other) == ["bar.txt"]
    assert names(result.internal) == ["*scratch*"]


def test_classify_drops_hidden_buffers() -> None:
    buffers = make_buffers(" *minibuf*", "a.py", " hidden")

    result = classify(buffers, PopupConfig(recent_count=None))

    assert names(result.recent) == ["a.py"]
    assert len(result) == 1


def test_classify_recent_keeps_mru_order() -> None:
    buffers = make_buffers("zeta", "alpha", "mid", "beta")

    result = classify(buffers, PopupConfig(recent_count=3))

    assert names(result.recent) == ["zeta", "alpha", "mid"]
    assert names(result.other) == ["beta"]


def test_classify_zero_recent_count_disables_recent_group() -> None:
    buffers = make_buffers("a", "b", "c")

    result = classify(buffers, PopupConfig(recent_count=0))

    assert result.recent == ()
    assert names(result.other) == ["a", "b", "c"]


def test_classify_unlimited_recent_leaves_other_empty() -> None:
    buffers = make_buffers("a", "b", "c", "d", "e", "f", "g")

    result = classify(buffers, PopupConfig(recent_count=None))

    assert result.other == ()
    assert names(result.recent) == ["a", "b", "c", "d", "e", "f", "g"]


def test_classify_separate_internal_never_takes_recent_slot() -> None:
    buffers = make_buffers("*Messages*", "*scratch*", "a", "b")

    result = classify(buffers, PopupConfig(recent_count=1))

    assert names(result.recent) == ["a"]
    assert names(result.other) == ["b"]
    assert names(result.internal) == ["*Messages*", "*scratch*"]


def test_classify_normal_handling_treats_internal_like_any_buffer() -> None:
    buffers = make_buffers("*Messages*", "a", "*scratch*")

    result = classify(
        buffers,
        PopupConfig(recent_count=1, internal_handling=InternalHandling.NORMAL),
    )

    assert names(result.recent) == ["*Messages*"]
    assert names(result.other) == ["a", "*scratch*"]
    assert result.internal == ()


def test_classify_hide_handling_excludes_internal() -> None:
    buffers = make_buffers("*Messages*", "a", "*scratch*", "b")

    result = classify(
        buffers, PopupConfig(recent_count=1, internal_handling=InternalHandling.HIDE)
    )

    assert names(result.recent) == ["a"]
    assert names(result.other) == ["b"]
    assert result.internal == ()


@pytest.mark.parametrize("handling", ["separate", "normal", "hide"])
@pytest.mark.parametrize("recent_count", [0, 1, 3, None])
def test_classify_places_each_visible_buffer_once(
    handling: str, recent_count: int | None
) -> None:
    buffers = make_buffers("*Messages*", "a", " hidden", "B", "*scratch*", "c", "d")
    config = PopupConfig(recent_count=recent_count, internal_handling=handling)

    result = classify(buffers, config)

    placed = list(result.recent) + list(result.other) + list(result.internal)
    expected = [
        buffer
        for buffer in buffers
        if not buffer.is_hidden
        and not (handling == "hide" and buffer.is_internal)
    ]
    assert sorted(names(placed)) == sorted(names(expected))
    assert len(placed) == len(expected)
