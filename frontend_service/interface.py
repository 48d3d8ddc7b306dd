"""Terminal presentation layer built on ``rich``.

``ConsoleUI`` is the only object that reads from or writes to the terminal.
The review and quiz sessions and the menu talk to it through a small set of
prompt and notification calls, so tests can swap in a scripted fake.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

logger = logging.getLogger(__name__)


class ConsoleUI:
    """Prompt primitives and coloured notifications for an interactive terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    # -- output -----------------------------------------------------------
    def _notify(self, label: str, style: str, message: str):
        self.console.print(Text.assemble((f" {label} ", style), " ", message))

    def info(self, message: str):
        self._notify("INFO", "bold black on cyan", message)

    def warning(self, message: str):
        self._notify("WARNING", "bold black on yellow", message)

    def error(self, message: str):
        self._notify("ERROR", "bold white on red", message)

    def success(self, message: str):
        self._notify("SUCCESS", "bold black on green", message)

    def header(self, text: str):
        self.console.print(Panel(Text(text, justify="center"), style="bold magenta"))

    def section(self, text: str):
        self.console.rule(Text(text, style="bold"), align="left")

    def show(self, text: str, style: Optional[str] = None):
        self.console.print(Text(text, style=style or ""))

    def table(self, headers, rows):
        table = Table(show_header=True, header_style="bold")
        for h in headers:
            table.add_column(h)
        for row in rows:
            table.add_row(*[escape(str(cell)) for cell in row])
        self.console.print(table)

    # -- input ------------------------------------------------------------
    def pause(self, prompt: str):
        self.console.input(escape(prompt))

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(escape(prompt), default=default, console=self.console)

    def text_input(self, prompt: str, default: Optional[str] = None) -> str:
        if default is None:
            return Prompt.ask(escape(prompt), console=self.console)
        return Prompt.ask(escape(prompt), default=default, console=self.console)

    def select_one(self, label: str, options) -> str:
        """Show ``options`` as a numbered list and return the chosen entry.

        A blank answer cancels the selection and returns ``""``.
        """
        if not options:
            return ""
        for i, option in enumerate(options, start=1):
            if option.startswith(f"{i}."):
                self.console.print(f"  {escape(option)}")
            else:
                self.console.print(f"  [cyan]{i}.[/cyan] {escape(option)}")

        while True:
            raw = Prompt.ask(
                f"{escape(label)} [dim](1-{len(options)}, blank to cancel)[/dim]",
                default="",
                show_default=False,
                console=self.console,
            ).strip()
            if not raw:
                return ""
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return options[int(raw) - 1]
            logger.debug("Rejected menu input %r", raw)
            self.error(f"Please enter a number between 1 and {len(options)}.")
