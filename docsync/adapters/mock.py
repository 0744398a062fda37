"""
Scripted console — test double for the operator console.

Answers are consumed in order; everything echoed or asked is kept in
a transcript so tests can assert on what the operator would have seen.
"""

from __future__ import annotations

from collections.abc import Iterable

from docsync.adapters.base import Console
from docsync.core.errors import InputClosedError


class ScriptedConsole(Console):
    """Console that replays a fixed list of answers."""

    def __init__(self, answers: Iterable[str] = ()):
        self._answers = list(answers)
        self._transcript: list[str] = []
        self._prompts: list[str] = []

    @property
    def transcript(self) -> list[str]:
        """Every echoed line and prompt, in order."""
        return self._transcript

    @property
    def prompts(self) -> list[str]:
        """Only the prompts that were asked."""
        return self._prompts

    @property
    def remaining(self) -> int:
        """Answers not yet consumed."""
        return len(self._answers)

    @property
    def output(self) -> str:
        """The transcript joined into a single string."""
        return "\n".join(self._transcript)

    def echo(self, message: str = "") -> None:
        self._transcript.append(message)

    def ask(self, prompt: str) -> str:
        self._transcript.append(prompt)
        self._prompts.append(prompt)
        if not self._answers:
            raise InputClosedError("no operator input available")
        return self._answers.pop(0)
