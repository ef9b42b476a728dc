from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from .model import Action, Handler, MenuChoice, validate_menu

logger = logging.getLogger(__name__)

FAREWELL = "👋 Thanks for stopping by. Goodbye!"


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Prompter(Protocol):
    def prompt(self) -> Action: ...


class DispatchLoop:
    """Prompt, dispatch, repeat until QUIT or an interrupt.

    The loop is the only recovery point: nothing raised while RUNNING escapes
    `run()`, and exactly one farewell is printed per run.
    """

    def __init__(
        self,
        prompter: Prompter,
        registry: Mapping[Action, Handler],
        console: Console,
        menu: tuple[MenuChoice, ...] | None = None,
    ) -> None:
        if menu is not None:
            validate_menu(menu, registry)
        self._prompter = prompter
        self._registry = registry
        self._console = console
        self.state = LoopState.RUNNING

    def _farewell(self) -> None:
        self._console.print(f"\n[bold]{FAREWELL}[/bold]")
        self.state = LoopState.TERMINATED

    def step(self) -> LoopState:
        """Run one prompt/dispatch iteration."""
        action = self._prompter.prompt()
        if action is Action.QUIT:
            self._farewell()
            return self.state
        handler = self._registry.get(action)
        if handler is None:
            logger.debug("No handler for %r, ignoring", action)
            return self.state
        handler()
        return self.state

    def run(self, startup: Callable[[], None] | None = None) -> int:
        """Loop until TERMINATED; `startup` runs once first, inside the same boundary."""
        try:
            if startup is not None:
                startup()
            while self.state is LoopState.RUNNING:
                self.step()
        except KeyboardInterrupt:
            self._farewell()
        except Exception as e:
            logger.debug("Unexpected error in menu loop", exc_info=True)
            self._console.print(f"[red]Error: {escape(str(e))}[/red]")
            self.state = LoopState.TERMINATED
        return 0
