"""
Click console — binds the operator console to the terminal.
"""

from __future__ import annotations

import click

from docsync.adapters.base import Console
from docsync.core.errors import InputClosedError


class ClickConsole(Console):
    """Terminal console backed by ``click.echo`` and ``click.prompt``."""

    def echo(self, message: str = "") -> None:
        click.echo(message)

    def ask(self, prompt: str) -> str:
        # A prompt ending in a newline puts the answer on its own line
        # (the y/n question); anything else reads on the same line.
        text = prompt.rstrip()
        suffix = prompt[len(text):] or " "
        try:
            return click.prompt(
                text,
                default="",
                show_default=False,
                prompt_suffix=suffix,
            )
        except click.Abort as e:
            raise InputClosedError("no operator input available") from e
