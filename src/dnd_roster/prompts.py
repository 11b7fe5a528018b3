"""
Prompting boundary between the roster and whoever is driving it.

The roster only ever asks for three things: a choice from a list, a line of
text, or a yes/no answer. ``ConsolePrompter`` answers them on the terminal;
``ScriptedPrompter`` replays canned answers so the core can run headless.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Protocol, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt

logger = logging.getLogger("dnd-roster.prompts")

# (label, value) pairs, in display order
Options = Sequence[tuple[str, str]]


class PromptAborted(Exception):
    """The input source closed or failed before an answer was given."""
    pass


class Prompter(Protocol):
    """Anything that can answer the roster's questions."""

    def select(self, title: str, options: Options) -> str: ...

    def text(self, title: str) -> str: ...

    def confirm(self, title: str) -> bool: ...


class ConsolePrompter:
    """Interactive prompts on a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(self, title: str, options: Options) -> str:
        """Show a numbered menu and return the value of the chosen option."""
        self.console.print(f"[bold]{title}[/bold]")
        for number, (label, _value) in enumerate(options, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]. {label}")

        choices = [str(number) for number in range(1, len(options) + 1)]
        try:
            picked = Prompt.ask("Choose", console=self.console, choices=choices, show_choices=False)
        except EOFError as e:
            raise PromptAborted("input closed") from e
        return options[int(picked) - 1][1]

    def text(self, title: str) -> str:
        try:
            return Prompt.ask(title, console=self.console, default="", show_default=False)
        except EOFError as e:
            raise PromptAborted("input closed") from e

    def confirm(self, title: str) -> bool:
        try:
            return Confirm.ask(title, console=self.console, default=False)
        except EOFError as e:
            raise PromptAborted("input closed") from e


class ScriptedPrompter:
    """Answers prompts from a fixed queue.

    Text prompts take the next answer as-is; select prompts accept either an
    option value or its label; confirm prompts take a bool. Running out of
    answers raises PromptAborted, like a closed terminal.
    """

    def __init__(self, answers: Iterable[str | bool]) -> None:
        self._answers: deque[str | bool] = deque(answers)
        self.asked: list[str] = []

    def _next(self, title: str) -> str | bool:
        self.asked.append(title)
        if not self._answers:
            raise PromptAborted(f"no scripted answer for {title!r}")
        return self._answers.popleft()

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def select(self, title: str, options: Options) -> str:
        answer = self._next(title)
        for label, value in options:
            if answer in (label, value):
                return value
        raise PromptAborted(f"{answer!r} is not an option for {title!r}")

    def text(self, title: str) -> str:
        return str(self._next(title))

    def confirm(self, title: str) -> bool:
        answer = self._next(title)
        if isinstance(answer, str):
            return answer.strip().lower() in ("y", "yes", "true")
        return bool(answer)
