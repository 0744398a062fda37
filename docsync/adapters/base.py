"""
Console base — the contract between the sync flow and the operator.

The sync stages never touch stdin or stdout directly.  They print and
ask through a Console, so the CLI can bind it to the terminal and tests
can bind it to a script of answers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# The only answer accepted as confirmation.
CONFIRM_ANSWER = "y"


class Console(ABC):
    """Abstract operator console.

    To create a new console:
        1. Subclass Console
        2. Implement echo and ask
    """

    @abstractmethod
    def echo(self, message: str = "") -> None:
        """Show one line of output to the operator."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return one line of operator input.

        Blank input is returned as an empty string.

        Raises:
            InputClosedError: If no more input can be read.
        """

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; only an exact ``y`` counts as yes."""
        return self.ask(prompt).strip() == CONFIRM_ANSWER
