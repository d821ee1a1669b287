# tests/frame_viewer/conftest.py
"""Fixtures and headless NiceGUI fakes for frame viewer tests."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

import pytest


class _FakeElement:
    def __init__(self, text: str = "", value: Any = None) -> None:
        self.text = text
        self.value = value
        self.visible: bool = True
        self.deleted = False
        self.prop_calls: List[str] = []

    def classes(self, *_args: Any, **_kwargs: Any) -> "_FakeElement":
        return self

    def props(self, add: str = "", *_args: Any, **_kwargs: Any) -> "_FakeElement":
        self.prop_calls.append(add)
        return self

    def style(self, *_args: Any, **_kwargs: Any) -> "_FakeElement":
        return self

    def bind_visibility_from(self, *_args: Any, **_kwargs: Any) -> "_FakeElement":
        return self

    def delete(self) -> None:
        self.deleted = True

    def __enter__(self) -> "_FakeElement":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


class _FakeDialog(_FakeElement):
    def __init__(self, fake_ui: "FakeUI") -> None:
        super().__init__()
        self._ui = fake_ui
        self.submitted: Any = None

    def submit(self, value: Any) -> None:
        self.submitted = value

    def __await__(self):
        async def _wait() -> Any:
            if self._ui.on_dialog_open is not None:
                self._ui.on_dialog_open(self._ui)
            return self._ui.dialog_results.pop(0)

        return _wait().__await__()


class _FakeInteractiveImage(_FakeElement):
    def __init__(self, source: Any, events: List[str]) -> None:
        super().__init__()
        self.source = source
        self.events = events
        self.content = ""
        self.mouse_handler: Optional[Callable[..., Any]] = None
        self.update_count = 0

    def on_mouse(self, handler: Callable[..., Any]) -> "_FakeInteractiveImage":
        self.mouse_handler = handler
        return self

    def set_source(self, source: Any) -> None:
        self.source = source

    def update(self) -> None:
        self.update_count += 1


class FakeUI:
    """Stand-in for ``nicegui.ui`` recording everything widgets build."""

    def __init__(self) -> None:
        self.dialogs: List[_FakeDialog] = []
        self.checkboxes: List[_FakeElement] = []
        self.numbers: List[_FakeElement] = []
        self.selects: List[_FakeElement] = []
        self.buttons: List[_FakeElement] = []
        self.timers: List[Callable[[], None]] = []
        self.global_handlers: dict[str, Callable[..., Any]] = {}
        self.last_interactive: Optional[_FakeInteractiveImage] = None

        # Results returned by successive `await dialog` calls
        self.dialog_results: List[Any] = []
        # Called while a dialog is "open", e.g. to change form values
        self.on_dialog_open: Optional[Callable[["FakeUI"], None]] = None

    def element(self, _tag: str = "div") -> _FakeElement:
        return _FakeElement()

    def interactive_image(self, source: Any = None, *, events: List[str] | None = None, **_kwargs: Any) -> _FakeInteractiveImage:
        self.last_interactive = _FakeInteractiveImage(source, events or [])
        return self.last_interactive

    def on(self, event_type: str, handler: Callable[..., Any]) -> None:
        self.global_handlers[event_type] = handler

    def timer(self, _interval: float, callback: Callable[[], None], *, once: bool = False) -> _FakeElement:
        self.timers.append(callback)
        return _FakeElement()

    def run_timers(self) -> None:
        timers, self.timers = self.timers, []
        for callback in timers:
            callback()

    def dialog(self) -> _FakeDialog:
        d = _FakeDialog(self)
        self.dialogs.append(d)
        return d

    def card(self) -> _FakeElement:
        return _FakeElement()

    def column(self) -> _FakeElement:
        return _FakeElement()

    def row(self) -> _FakeElement:
        return _FakeElement()

    def label(self, text: str = "") -> _FakeElement:
        return _FakeElement(text=text)

    def checkbox(self, text: str = "", *, value: bool = False) -> _FakeElement:
        el = _FakeElement(text=text, value=value)
        self.checkboxes.append(el)
        return el

    def number(self, label: str = "", *, value: Any = None, **_kwargs: Any) -> _FakeElement:
        el = _FakeElement(text=label, value=value)
        self.numbers.append(el)
        return el

    def select(self, options: Any, *, value: Any = None, label: str = "") -> _FakeElement:
        el = _FakeElement(text=label, value=value)
        el.options = options  # type: ignore[attr-defined]
        self.selects.append(el)
        return el

    def button(self, text: str, *, on_click: Callable[..., Any]) -> _FakeElement:
        el = _FakeElement(text=text)
        el.on_click = on_click  # type: ignore[attr-defined]
        self.buttons.append(el)
        return el


@pytest.fixture()
def fake_ui() -> FakeUI:
    return FakeUI()
