from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

Handler = Callable[[], None]


class MenuConfigError(ValueError):
    """The menu and the action registry disagree."""


class Action(str, Enum):
    EMAIL = "email"
    VIEW_RESUME = "view_resume"
    VIEW_PORTFOLIO = "view_portfolio"
    VIEW_GITHUB = "view_github"
    VIEW_LINKEDIN = "view_linkedin"
    VIEW_TWITTER = "view_twitter"
    QUIT = "quit"


@dataclass(frozen=True)
class ProfileInfo:
    name: str
    title: str
    location: str
    company: str | None = None
    skills: tuple[str, ...] = ()


@dataclass(frozen=True)
class LinkSet:
    email: str | None  # mailto: URI
    resume: str
    portfolio: str
    github: str
    linkedin: str
    twitter: str | None = None


_DEFAULT_SPEEDS = {"spinner": 1.0, "typewriter": 0.01}


@dataclass(frozen=True)
class ThemeConfig:
    border_color: str = "cyan"
    background_color: str = "default"
    banner_font: str = "standard"
    animation_speeds: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(_DEFAULT_SPEEDS))
    )

    def __post_init__(self) -> None:
        if not isinstance(self.animation_speeds, MappingProxyType):
            object.__setattr__(self, "animation_speeds", MappingProxyType(dict(self.animation_speeds)))

    def speed(self, name: str) -> float:
        return self.animation_speeds.get(name, _DEFAULT_SPEEDS.get(name, 1.0))


@dataclass(frozen=True)
class CardConfig:
    profile: ProfileInfo
    links: LinkSet
    theme: ThemeConfig = field(default_factory=ThemeConfig)


@dataclass(frozen=True)
class MenuChoice:
    label: str
    action: Action


# (action, label, LinkSet attribute)
_LINK_ACTIONS: tuple[tuple[Action, str, str], ...] = (
    (Action.EMAIL, "📧  Send me an email", "email"),
    (Action.VIEW_RESUME, "📄  View my resume", "resume"),
    (Action.VIEW_PORTFOLIO, "🌐  View my portfolio", "portfolio"),
    (Action.VIEW_GITHUB, "🐙  View my GitHub", "github"),
    (Action.VIEW_LINKEDIN, "💼  View my LinkedIn", "linkedin"),
    (Action.VIEW_TWITTER, "🐦  View my Twitter", "twitter"),
)


def link_for(links: LinkSet, action: Action) -> str | None:
    """Return the URL an action opens, or None for QUIT and unset links."""
    for act, _, attr in _LINK_ACTIONS:
        if act is action:
            return getattr(links, attr)
    return None


def build_menu(links: LinkSet) -> tuple[MenuChoice, ...]:
    choices = [
        MenuChoice(label, act)
        for act, label, attr in _LINK_ACTIONS
        if getattr(links, attr)
    ]
    choices.append(MenuChoice("🚪  Exit", Action.QUIT))
    return tuple(choices)


def validate_menu(menu: tuple[MenuChoice, ...], registry: Mapping[Action, Handler]) -> None:
    """Raise MenuConfigError unless every non-quit menu action has a handler.

    Also rejects an empty menu, duplicate actions, and a menu without QUIT.
    """
    if not menu:
        raise MenuConfigError("menu is empty")
    seen: set[Action] = set()
    for choice in menu:
        if choice.action in seen:
            raise MenuConfigError(f"duplicate menu action: {choice.action.value}")
        seen.add(choice.action)
    if Action.QUIT not in seen:
        raise MenuConfigError("menu has no quit entry")
    missing = [a.value for a in seen if a is not Action.QUIT and a not in registry]
    if missing:
        raise MenuConfigError(f"no handler registered for: {', '.join(sorted(missing))}")
