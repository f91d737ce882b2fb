"""Console output styles."""

from dataclasses import dataclass, field
from itertools import cycle
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


@dataclass
class Formatter:
    """Prints titles, status lines, info lines and warnings.

    Consecutive info lines alternate between ``info_styles`` so long
    branch listings are easier to scan.
    """

    console: Console = field(default_factory=Console)
    title_style: str = "bold green"
    status_style: str = "bold blue"
    warn_style: str = "bold yellow"
    info_styles: tuple[str, ...] = ("cyan", "bright_cyan")
    _info_cycle: Optional[Iterator[str]] = field(default=None, init=False, repr=False)

    def _next_info_style(self) -> str:
        if self._info_cycle is None:
            self._info_cycle = cycle(self.info_styles)
        return next(self._info_cycle)

    def title(self, text: str) -> None:
        self.console.print()
        self.console.print(escape(text), style=self.title_style, soft_wrap=True)

    def status(self, text: str) -> None:
        self.console.print()
        self.console.print(escape(text), style=self.status_style, soft_wrap=True)
        self.console.print()

    def info(self, text: str) -> None:
        self.console.print(escape(text), style=self._next_info_style(), soft_wrap=True)

    def warn(self, text: str) -> None:
        self.console.print(escape(text), style=self.warn_style, soft_wrap=True)

    def plain(self, text: str) -> None:
        self.console.print(escape(text), highlight=False, soft_wrap=True)

    def failures(self, failed: list[tuple[str, str]]) -> None:
        """Show branches that could not be deleted with git's message."""
        table = Table(
            title="Failed to delete the following branches",
            show_header=True,
            header_style="bold",
            title_style="bold red",
            show_edge=True,
        )
        table.add_column("Branch", style="cyan", no_wrap=True)
        table.add_column("Error", style="yellow")
        for branch, message in failed:
            table.add_row(escape(branch), escape(message))
        self.console.print()
        self.console.print(table)
