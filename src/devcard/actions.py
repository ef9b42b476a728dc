from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from .model import Action, Handler, LinkSet, ThemeConfig, link_for

logger = logging.getLogger(__name__)

Opener = Callable[[str], bool]

# action -> (in-progress text, confirmation text)
_MESSAGES: dict[Action, tuple[str, str]] = {
    Action.EMAIL: ("Opening mail client…", "📧 Looking forward to hearing from you!"),
    Action.VIEW_RESUME: ("Opening resume…", "📄 Resume opened in your browser."),
    Action.VIEW_PORTFOLIO: ("Opening portfolio…", "🌐 Portfolio opened in your browser."),
    Action.VIEW_GITHUB: ("Opening GitHub…", "🐙 See you on GitHub!"),
    Action.VIEW_LINKEDIN: ("Opening LinkedIn…", "💼 Let's connect on LinkedIn!"),
    Action.VIEW_TWITTER: ("Opening Twitter…", "🐦 See you on Twitter!"),
}


def _open_quietly(opener: Opener, url: str) -> bool:
    try:
        opened = opener(url)
    except Exception as e:
        logger.info("Opening %s failed: %s", url, e)
        return False
    if opened is False:
        logger.info("No browser available to open %s", url)
        return False
    return True


def make_handler(
    action: Action,
    url: str,
    console: Console,
    opener: Opener = webbrowser.open,
    theme: ThemeConfig | None = None,
) -> Handler:
    working, confirmation = _MESSAGES[action]
    speed = (theme or ThemeConfig()).speed("spinner")

    def handler() -> None:
        with console.status(working, spinner="dots", speed=speed):
            opened = _open_quietly(opener, url)
        if opened:
            console.print(f"[green]{confirmation}[/green]")
        else:
            console.print(f"[yellow]Couldn't open it automatically, the link is:[/yellow] {escape(url)}")

    return handler


def build_registry(
    links: LinkSet,
    console: Console,
    opener: Opener = webbrowser.open,
    theme: ThemeConfig | None = None,
) -> dict[Action, Handler]:
    """One handler per action whose link is configured."""
    registry: dict[Action, Handler] = {}
    for action in _MESSAGES:
        url = link_for(links, action)
        if url:
            registry[action] = make_handler(action, url, console, opener, theme)
    return registry
