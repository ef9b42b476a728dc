from __future__ import annotations

import io
from contextlib import contextmanager

import pytest
from rich.console import Console

from devcard.actions import build_registry, make_handler
from devcard.model import Action, LinkSet, build_menu


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def _out(console: Console) -> str:
    return console.file.getvalue()


def _links(twitter: str | None = None) -> LinkSet:
    return LinkSet(
        email="mailto:jane@example.com",
        resume="https://example.com/cv.pdf",
        portfolio="https://example.com",
        github="https://github.com/jane",
        linkedin="https://linkedin.com/in/jane",
        twitter=twitter,
    )


class _Opener:
    def __init__(self, result=True, exc: BaseException | None = None):
        self.calls: list[str] = []
        self.result = result
        self.exc = exc

    def __call__(self, url: str) -> bool:
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.result


def test_registry_covers_menu():
    for links in (_links(), _links(twitter="https://twitter.com/jane")):
        registry = build_registry(links, _console(), opener=_Opener())
        menu = build_menu(links)
        non_quit = [c.action for c in menu if c.action is not Action.QUIT]
        assert sorted(registry, key=lambda a: a.value) == sorted(non_quit, key=lambda a: a.value)


def test_handler_opens_url_and_confirms():
    console, opener = _console(), _Opener()
    registry = build_registry(_links(), console, opener=opener)
    registry[Action.VIEW_GITHUB]()
    assert opener.calls == ["https://github.com/jane"]
    assert "See you on GitHub" in _out(console)


def test_handler_twice_is_independent():
    console, opener = _console(), _Opener()
    handler = make_handler(Action.EMAIL, "mailto:jane@example.com", console, opener)
    handler()
    handler()
    assert opener.calls == ["mailto:jane@example.com"] * 2
    assert _out(console).count("Looking forward to hearing from you") == 2


def test_opener_exception_absorbed():
    console = _console()
    handler = make_handler(Action.VIEW_RESUME, "https://example.com/cv.pdf", console,
                           _Opener(exc=RuntimeError("no display")))
    handler()
    out = _out(console)
    assert "Couldn't open it automatically" in out
    assert "https://example.com/cv.pdf" in out
    assert "Resume opened" not in out


def test_opener_returning_false_reported():
    console = _console()
    make_handler(Action.VIEW_PORTFOLIO, "https://example.com", console, _Opener(result=False))()
    assert "Couldn't open it automatically" in _out(console)


def test_keyboard_interrupt_not_absorbed():
    handler = make_handler(Action.EMAIL, "mailto:x@example.com", _console(),
                           _Opener(exc=KeyboardInterrupt()))
    with pytest.raises(KeyboardInterrupt):
        handler()


class _RecordingConsole(Console):
    """Console that logs status enter/exit and prints in order."""

    def __init__(self) -> None:
        super().__init__(file=io.StringIO(), width=200, color_system=None)
        self.events: list[str] = []

    @contextmanager
    def status(self, *args, **kwargs):
        self.events.append("status-start")
        try:
            yield
        finally:
            self.events.append("status-end")

    def print(self, *args, **kwargs) -> None:
        self.events.append("print")
        super().print(*args, **kwargs)


def test_spinner_stops_before_confirmation():
    console = _RecordingConsole()
    make_handler(Action.VIEW_GITHUB, "https://github.com/jane", console, _Opener())()
    assert console.events == ["status-start", "status-end", "print"]


def test_spinner_stops_before_fallback_message():
    console = _RecordingConsole()
    make_handler(Action.VIEW_GITHUB, "https://github.com/jane", console,
                 _Opener(exc=RuntimeError("no display")))()
    assert console.events == ["status-start", "status-end", "print"]
    assert "Couldn't open it automatically" in _out(console)


def test_spinner_stops_on_interrupt():
    console = _RecordingConsole()
    handler = make_handler(Action.VIEW_GITHUB, "https://github.com/jane", console,
                           _Opener(exc=KeyboardInterrupt()))
    with pytest.raises(KeyboardInterrupt):
        handler()
    assert console.events == ["status-start", "status-end"]


def test_blank_email_has_no_handler():
    links = LinkSet(
        email=None,
        resume="https://example.com/cv.pdf",
        portfolio="https://example.com",
        github="https://github.com/jane",
        linkedin="https://linkedin.com/in/jane",
    )
    registry = build_registry(links, _console(), opener=_Opener())
    assert Action.EMAIL not in registry
    assert Action.EMAIL not in [c.action for c in build_menu(links)]
