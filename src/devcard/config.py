from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .model import CardConfig, LinkSet, ProfileInfo, ThemeConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("local") / "devcard.toml"


DEFAULT_CONF = """# devcard profile (TOML)
[profile]
name = "Jane Doe"
title = "Software Engineer"
company = "Acme Corp"
location = "London, UK"
skills = ["Python", "Distributed systems", "Developer tooling"]

[links]
email = "jane@example.com"
resume = "https://example.com/resume.pdf"
portfolio = "https://example.com"
github = "https://github.com/janedoe"
linkedin = "https://www.linkedin.com/in/janedoe"
twitter = "https://twitter.com/janedoe"

[theme]
border_color = "cyan"
background_color = "default"
banner_font = "standard"

[theme.animation_speeds]
spinner = 1.0
typewriter = 0.01
"""


def _mailto(address: Any) -> str | None:
    address = _optional(address)
    if address is None:
        return None
    return address if address.lower().startswith("mailto:") else f"mailto:{address}"


def _optional(value: Any) -> str | None:
    return str(value) if value else None


def _skills(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(str(s) for s in value or ())


def config_from_dict(data: dict[str, Any]) -> CardConfig:
    """Build a CardConfig, filling anything missing from DEFAULT_CONF."""
    defaults = tomllib.loads(DEFAULT_CONF)
    prof = {**defaults["profile"], **data.get("profile", {})}
    links = {**defaults["links"], **data.get("links", {})}
    theme = {**defaults["theme"], **data.get("theme", {})}
    speeds = {**defaults["theme"]["animation_speeds"], **theme.get("animation_speeds", {})}

    return CardConfig(
        profile=ProfileInfo(
            name=str(prof["name"]),
            title=str(prof["title"]),
            company=_optional(prof.get("company")),
            location=str(prof["location"]),
            skills=_skills(prof.get("skills")),
        ),
        links=LinkSet(
            email=_mailto(links.get("email")),
            resume=str(links["resume"]),
            portfolio=str(links["portfolio"]),
            github=str(links["github"]),
            linkedin=str(links["linkedin"]),
            twitter=_optional(links.get("twitter")),
        ),
        theme=ThemeConfig(
            border_color=str(theme["border_color"]),
            background_color=str(theme["background_color"]),
            banner_font=str(theme["banner_font"]),
            animation_speeds=MappingProxyType({str(k): float(v) for k, v in speeds.items()}),
        ),
    )


def load_config(path: Path | None = None) -> CardConfig:
    """Read the profile TOML at `path`.

    A missing file yields the built-in profile. A malformed file is logged and
    also falls back to the built-in profile.
    """
    conf = Path(path or DEFAULT_CONFIG_PATH)
    if not conf.exists():
        logger.debug("No config at %s, using defaults", conf)
        return config_from_dict({})
    try:
        data = tomllib.loads(conf.read_text(encoding="utf-8"))
        return config_from_dict(data)
    except (tomllib.TOMLDecodeError, TypeError, ValueError) as e:
        logger.warning("Config %s is malformed (%s), using defaults", conf, e)
        return config_from_dict({})


def write_default_config(path: Path | None = None, *, force: bool = False) -> bool:
    """Write DEFAULT_CONF to `path`. Returns False if it exists and not `force`."""
    conf = Path(path or DEFAULT_CONFIG_PATH)
    if conf.exists() and not force:
        return False
    conf.parent.mkdir(parents=True, exist_ok=True)
    conf.write_text(DEFAULT_CONF, encoding="utf-8")
    return True
