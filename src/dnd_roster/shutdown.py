"""
Save-on-interrupt handling.

Python runs signal handlers on the main thread between bytecodes, possibly in
the middle of a roster update. The handler therefore only flips the state and
raises ``TerminationRequested``; the entry point catches it once the stack
has unwound (releasing the roster lock) and calls ``terminate()`` for the
final flush.
"""

from __future__ import annotations

import logging
import signal
from enum import Enum
from typing import Any

from rich.console import Console

from .roster import Roster

logger = logging.getLogger("dnd-roster.shutdown")

TERMINATION_NOTICE = "Received interrupt. Saving characters and exiting..."


class ShutdownState(str, Enum):
    """Lifecycle of the termination path."""
    RUNNING = "running"
    TERMINATING = "terminating"
    EXITED = "exited"


class TerminationRequested(BaseException):
    """Raised into the main loop when SIGINT or SIGTERM arrives.

    Derives from BaseException, like KeyboardInterrupt, so ``except
    Exception`` blocks in the loop do not swallow it.
    """

    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum = signum


def _handled_signals() -> list[signal.Signals]:
    signals = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        signals.append(signal.SIGTERM)
    return signals


class ShutdownHandler:
    """Flushes the roster exactly once when the process is asked to stop."""

    def __init__(self, roster: Roster, console: Console | None = None) -> None:
        self.roster = roster
        self.console = console or Console()
        self.state = ShutdownState.RUNNING
        self._previous: dict[signal.Signals, Any] = {}

    def install(self) -> None:
        """Route SIGINT and SIGTERM to this handler."""
        for signum in _handled_signals():
            self._previous[signum] = signal.signal(signum, self._on_signal)
        logger.debug("🛑 Termination handlers installed.")

    def uninstall(self) -> None:
        """Restore whatever handlers were active before ``install``."""
        for signum, previous in self._previous.items():
            signal.signal(signum, previous)
        self._previous.clear()

    def _on_signal(self, signum: int, frame: Any) -> None:
        if self.state is not ShutdownState.RUNNING:
            logger.debug(f"Ignoring signal {signum} while {self.state.value}.")
            return
        self.state = ShutdownState.TERMINATING
        raise TerminationRequested(signum)

    def request(self, signum: int = signal.SIGINT) -> None:
        """Trigger the termination path as if ``signum`` had been received."""
        self._on_signal(signum, None)

    def terminate(self) -> int:
        """Perform the final flush and report the exit status.

        Safe to call more than once; only the first call saves.
        """
        if self.state is ShutdownState.EXITED:
            return 0

        self.state = ShutdownState.TERMINATING
        self.console.print(f"\n{TERMINATION_NOTICE}")
        self.roster.flush()
        self.state = ShutdownState.EXITED
        logger.debug("🛑 Final flush done, exiting.")
        return 0
