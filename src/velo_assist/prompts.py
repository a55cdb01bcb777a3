"""Terminal prompter used by the generation commands."""

from pathlib import Path

import typer
from rich.console import Console

from velo_assist.commands import Prompter, Validator


class TerminalPrompter(Prompter):
    """Asks questions on the terminal with typer and reports with rich.

    An empty answer counts as cancelling the prompt.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    async def ask_text(
        self,
        prompt: str,
        placeholder: str = "",
        validate: Validator | None = None,
    ) -> str | None:
        label = f"{prompt} [{placeholder}]" if placeholder else prompt
        while True:
            value = typer.prompt(label, default="", show_default=False).strip()
            if not value:
                return None
            if validate is not None:
                message = validate(value)
                if message:
                    self.console.print(f"[red]{message}[/red]")
                    continue
            return value

    async def pick(self, options: list[str], placeholder: str = "") -> str | None:
        if placeholder:
            self.console.print(placeholder)
        for index, option in enumerate(options, start=1):
            self.console.print(f"  {index}. {option}")

        choice = typer.prompt("Choice", default="", show_default=False).strip()
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1]
        return None

    async def confirm_overwrite(self, message: str) -> bool:
        return typer.confirm(message, default=False)

    async def show_error(self, message: str) -> None:
        self.console.print(f"[red]Error: {message}[/red]")

    async def open_document(self, path: Path) -> None:
        self.console.print(f"[green]✓[/green] Created {path}")
