from __future__ import annotations

import pytest

from buffer_popup.config import ColumnMode, PopupConfig
from buffer_popup.menu import BufferInfo, display_path, format_label, max_name_length


def make_config(**overrides: object) -> PopupConfig:
    values: dict[str, object] = {"modified_tag": "*", "unmodified_tag": " "}
    values.update(overrides)
    return PopupConfig(**values)  # type: ignore[arg-type]


def test_parenthesis_labels_match_worked_example() -> None:
    config = make_config(column_mode="parenthesis")
    foo = BufferInfo("foo.txt", "/a/foo.txt", modified=True)
    bar = BufferInfo("bar.txt", "/b/bar.txt")
    scratch = BufferInfo("*scratch*")
    width = max_name_length([foo, bar, scratch])

    assert format_label(foo, width, config) == "*  foo.txt (/a/foo.txt)"
    assert format_label(bar, width, config) == "   bar.txt (/b/bar.txt)"
    assert format_label(scratch, width, config) == "   *scratch* ()"


def test_modified_without_file_uses_unmodified_tag() -> None:
    config = make_config(max_filename_length=0)
    buffer = BufferInfo("*scratch*", modified=True)

    assert format_label(buffer, 0, config) == "   *scratch*"


def test_zero_max_filename_length_hides_path() -> None:
    config = make_config(max_filename_length=0, column_mode=ColumnMode.TAB)
    buffer = BufferInfo("main.py", "/repo/main.py", modified=True)

    assert format_label(buffer, 20, config) == "*  main.py"


def test_tab_mode_separates_name_and_path() -> None:
    config = make_config(column_mode="tab")
    buffer = BufferInfo("main.py", "/repo/main.py")

    assert format_label(buffer, 20, config) == "   main.py\t/repo/main.py"


def test_tab_mode_keeps_tab_without_path() -> None:
    config = make_config(column_mode="tab")

    assert format_label(BufferInfo("*Messages*"), 10, config) == "   *Messages*\t"


def test_spaces_mode_aligns_path_column() -> None:
    config = make_config(column_mode="spaces")
    buffers = [
        BufferInfo("a", "/x/a"),
        BufferInfo("longer_name.py", "/x/longer_name.py", modified=True),
        BufferInfo("mid.txt", "/x/mid.txt"),
    ]
    width = max_name_length(buffers)

    labels = [format_label(buffer, width, config) for buffer in buffers]
    offsets = {label.index("/x/") for label in labels}

    assert len(offsets) == 1
    assert labels[0] == "   a" + " " * 13 + "  /x/a"


@pytest.mark.parametrize(
    ("path", "limit", "expected"),
    [
        ("/a/foo.txt", 3, "...txt"),
        ("/a/foo.txt", 10, "/a/foo.txt"),
        ("/a/foo.txt", None, "/a/foo.txt"),
        ("/home/user/project/src/module.py", 12, "...rc/module.py"),
        (None, 5, ""),
    ],
)
def test_display_path_truncates_from_the_left(
    path: str | None, limit: int | None, expected: str
) -> None:
    assert display_path(path, limit) == expected


def test_truncated_path_used_in_label() -> None:
    config = make_config(max_filename_length=3, column_mode="parenthesis")
    buffer = BufferInfo("foo.txt", "/a/foo.txt")

    assert format_label(buffer, 7, config) == "   foo.txt (...txt)"


def test_max_name_length_of_empty_input_is_zero() -> None:
    assert max_name_length([]) == 0
