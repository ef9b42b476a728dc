from __future__ import annotations

import time

from pyfiglet import Figlet, FigletFont
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .model import CardConfig, LinkSet, ProfileInfo, ThemeConfig

USAGE_TIP = "Tip: pick a number and press Enter. Ctrl-C quits at any time."


class Renderer:
    def __init__(self, console: Console, theme: ThemeConfig | None = None) -> None:
        self.console = console
        self.theme = theme or ThemeConfig()

    def _style(self, fg: str) -> str:
        bg = self.theme.background_color
        return fg if bg in ("", "default") else f"{fg} on {bg}"

    def banner(self, name: str) -> None:
        font = self.theme.banner_font
        if font not in FigletFont.getFonts():
            font = "standard"
        width = max(self.console.width, 40)
        art = Figlet(font=font, width=width).renderText(name if name.strip() else " ")
        self.console.print(art.rstrip("\n"), style=f"bold {self._style(self.theme.border_color)}")
        self.console.print()

    def profile_panel(self, profile: ProfileInfo, links: LinkSet) -> None:
        body = Text()
        body.append(f"{profile.name}\n", style="bold")
        role = profile.title if not profile.company else f"{profile.title} @ {profile.company}"
        body.append(f"{role}\n", style="italic")
        body.append(f"📍 {profile.location}\n")
        if profile.skills:
            body.append("\nSkills: ", style="bold")
            body.append(" • ".join(profile.skills) + "\n")
        body.append("\n")
        if links.email:
            body.append(f"Email     {links.email.removeprefix('mailto:')}\n", style="dim")
        body.append(f"GitHub    {links.github}\n", style="dim")
        body.append(f"LinkedIn  {links.linkedin}", style="dim")
        if links.twitter:
            body.append(f"\nTwitter   {links.twitter}", style="dim")
        self.console.print(
            Panel(
                body,
                border_style=self.theme.border_color,
                style=self._style("default"),
                padding=(1, 2),
                expand=False,
            )
        )

    def usage_tip(self) -> None:
        delay = self.theme.speed("typewriter")
        if not self.console.is_terminal or delay <= 0:
            self.console.print(USAGE_TIP, style="dim")
            return
        # typewriter effect, terminals only
        for ch in USAGE_TIP:
            self.console.print(ch, style="dim", end="")
            time.sleep(delay)
        self.console.print()

    def links_table(self, links: LinkSet) -> None:
        t = Table(title="Links", show_lines=False)
        t.add_column("Link", style="cyan", no_wrap=True)
        t.add_column("URL", style="bold")
        if links.email:
            t.add_row("Email", links.email)
        t.add_row("Resume", links.resume)
        t.add_row("Portfolio", links.portfolio)
        t.add_row("GitHub", links.github)
        t.add_row("LinkedIn", links.linkedin)
        if links.twitter:
            t.add_row("Twitter", links.twitter)
        self.console.print(t)

    def startup(self, config: CardConfig, *, banner: bool = True) -> None:
        """Banner, profile panel and tip; called once before the menu loop."""
        if banner:
            self.banner(config.profile.name)
        self.profile_panel(config.profile, config.links)
        self.usage_tip()
