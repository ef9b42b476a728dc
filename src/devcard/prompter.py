from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from .model import Action, MenuChoice


class MenuPrompter:
    """Numbered menu over a fixed tuple of MenuChoices.

    `prompt()` never raises for cancellation: Ctrl-C or a closed stdin
    returns Action.QUIT after a one-line notice.
    """

    def __init__(self, menu: tuple[MenuChoice, ...], console: Console) -> None:
        self._menu = menu
        self._console = console

    def _show(self) -> None:
        self._console.print(Text("\nWhat would you like to do?", style="bold"))
        for idx, choice in enumerate(self._menu, start=1):
            self._console.print(f"  {idx}) {choice.label}")

    def prompt(self) -> Action:
        self._show()
        keys = [str(i) for i in range(1, len(self._menu) + 1)]
        try:
            picked = Prompt.ask(
                "Option",
                console=self._console,
                choices=keys,
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError):
            self._console.print("\n[dim]Cancelled.[/dim]")
            return Action.QUIT
        return self._menu[int(picked) - 1].action
