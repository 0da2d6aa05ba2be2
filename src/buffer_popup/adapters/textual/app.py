"""Executable Textual app demonstrating the buffer popup."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

try:  # pragma: no cover - imported only when the demo runs
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.geometry import Region
    from textual.screen import ModalScreen
    from textual.widgets import Footer, Header, OptionList, Static
    from textual.widgets.option_list import Option
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use buffer_popup.adapters.textual.app"
    ) from exc

from buffer_popup.config import PopupConfig, load_config
from buffer_popup.host import ScreenPosition, WindowTarget
from buffer_popup.menu import BufferInfo, MenuModel
from buffer_popup.runtime import telemetry

from .controller import TextualBufferPopup, TextualPopupHooks

SUBMENU_PREFIX = "submenu:"


@dataclass(eq=False)
class OpenBuffer:
    """Demo-side buffer record; the popup only ever sees ``info()``."""

    name: str
    text: str = ""
    path: Optional[str] = None
    modified: bool = False

    def info(self) -> BufferInfo:
        return BufferInfo(
            name=self.name, file_path=self.path, modified=self.modified, handle=self
        )


@dataclass
class BufferRing:
    """Open buffers in most-recently-used order; index 0 is current."""

    buffers: list[OpenBuffer] = field(default_factory=list)

    @property
    def current(self) -> Optional[OpenBuffer]:
        return self.buffers[0] if self.buffers else None

    def others(self) -> list[BufferInfo]:
        return [buffer.info() for buffer in self.buffers[1:]]

    def activate(self, buffer: OpenBuffer) -> None:
        self.buffers.remove(buffer)
        self.buffers.insert(0, buffer)


def load_buffers(paths: Sequence[str]) -> BufferRing:
    ring = BufferRing()
    seen: set[str] = set()
    for raw in paths:
        path = Path(raw)
        name = path.name
        # Mimic editors that disambiguate equal file names with a suffix.
        suffix = 2
        while name in seen:
            name = f"{path.name}<{suffix}>"
            suffix += 1
        seen.add(name)
        text = path.read_text(encoding="utf-8", errors="replace") if path.is_file() else ""
        ring.buffers.append(OpenBuffer(name=name, text=text, path=str(path.resolve())))
    ring.buffers.append(OpenBuffer(name="*scratch*", text="scratch buffer"))
    ring.buffers.append(OpenBuffer(name="*Messages*", text=""))
    ring.buffers.append(OpenBuffer(name=" *minibuf*", text=""))
    return ring


def is_outside(region: Region, x: int, y: int) -> bool:
    return not region.contains(x, y)


class BufferMenuScreen(ModalScreen[Optional[str]]):
    """Option list placed at the click position.

    Escape or a click outside the list cancels.
    """

    DEFAULT_CSS = """
	BufferMenuScreen {
		align: left top;
		background: $background 0%;
	}

	BufferMenuScreen OptionList {
		width: auto;
		max-width: 80;
		height: auto;
		max-height: 20;
		border: round $accent;
	}
	"""

    BINDINGS = [("escape", "dismiss_menu", "Cancel")]

    def __init__(self, model: MenuModel, position: ScreenPosition) -> None:
        super().__init__()
        self.model = model
        self.position = position

    def compose(self) -> ComposeResult:
        options: list[Option | None] = []
        for index, entry in enumerate(self.model.entries):
            if entry.kind == "separator":
                options.append(None)
            elif entry.kind == "submenu":
                options.append(Option(Text(entry.label), id=f"{SUBMENU_PREFIX}{index}"))
            else:
                options.append(
                    Option(Text(entry.label), id=entry.key, disabled=not entry.enabled)
                )
        yield OptionList(*options)

    def on_mount(self) -> None:
        x, y = self.position
        self.query_one(OptionList).styles.offset = (max(x, 0), max(y, 0))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        option_id = event.option.id
        if option_id and option_id.startswith(SUBMENU_PREFIX):
            entry = self.model.entries[int(option_id[len(SUBMENU_PREFIX):])]
            if entry.submenu is None:
                return
            x, y = self.position
            self.app.push_screen(
                BufferMenuScreen(entry.submenu, (x + 4, y + 1)), self._submenu_closed
            )
            return
        self.dismiss(option_id)

    def on_click(self, event: events.Click) -> None:
        event.stop()
        region = self.query_one(OptionList).region
        if is_outside(region, event.screen_x, event.screen_y):
            self.dismiss(None)

    def _submenu_closed(self, key: Optional[str]) -> None:
        if key is not None:
            self.dismiss(key)

    def action_dismiss_menu(self) -> None:
        self.dismiss(None)


class BufferPopupApp(App[None]):
    """Shows one buffer at a time; click or press ctrl+b to switch."""

    CSS = """
	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+b", "buffer_menu", "Buffers"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, ring: BufferRing, config: Optional[PopupConfig] = None) -> None:
        super().__init__()
        self.ring = ring
        self.popup = TextualBufferPopup(
            TextualPopupHooks(
                list_buffers=self.ring.others,
                show_menu=self._show_menu,
                switch_buffer=self._switch_buffer,
                update_status=self._update_status,
                log=self._log_line,
            ),
            config,
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Static("", id="buffer-view")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self._render_current()

    def on_click(self, event: events.Click) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        widget = event.widget
        live = widget is not None and widget.id == "buffer-view"
        self.popup.handle_click(
            event.screen_x, event.screen_y, window=widget, is_live_window=live
        )

    def action_buffer_menu(self) -> None:
        view = self.query_one("#buffer-view", Static)
        region = view.region
        self.popup.handle_click(region.x + 1, region.y + 1, window=view)

    def _show_menu(
        self,
        model: MenuModel,
        position: ScreenPosition,
        on_choice: Callable[[Optional[str]], None],
    ) -> None:
        self.push_screen(BufferMenuScreen(model, position), on_choice)

    def _switch_buffer(self, target: WindowTarget, buffer: BufferInfo) -> None:
        if not target.is_live_window:
            # No window under the pointer: focus the main view instead.
            self.query_one("#buffer-view", Static).focus()
        if isinstance(buffer.handle, OpenBuffer):
            self.ring.activate(buffer.handle)
        self._render_current()

    def _render_current(self) -> None:
        current = self.ring.current
        view = self.query_one("#buffer-view", Static)
        if current is None:
            view.update("")
            self.sub_title = ""
            return
        view.update(Text(current.text))
        self.sub_title = current.name

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(Text(status))

    def _log_line(self, line: str) -> None:
        telemetry.record_event("textual.log", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the buffer popup Textual demo.")
    parser.add_argument("files", nargs="*", help="Files to open as buffers")
    parser.add_argument(
        "--recent-count",
        help="Size of the recent group ('unlimited' for no limit)",
    )
    parser.add_argument(
        "--internal",
        choices=("separate", "normal", "hide"),
        help="How *internal* buffers are shown",
    )
    parser.add_argument(
        "--columns",
        choices=("tab", "spaces", "parenthesis"),
        help="Layout of the file path column",
    )
    parser.add_argument(
        "--max-filename-length",
        help="Truncate paths to this many trailing characters (0 hides paths)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings: dict[str, object] = {}
    if args.recent_count is not None:
        settings["recent_count"] = args.recent_count
    if args.internal:
        settings["internal_handling"] = args.internal
    if args.columns:
        settings["column_mode"] = args.columns
    if args.max_filename_length is not None:
        settings["max_filename_length"] = args.max_filename_length
    config = load_config(settings)
    app = BufferPopupApp(load_buffers(args.files), config)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
