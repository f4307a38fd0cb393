"""Dry-run tracing of citation replacements."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from mdcite.matcher import Match


class CitationTracer:
    """Print one line per replaced citation to a side console.

    Output looks like:
        [Citation found : 42] '[@a, @b]' -> [1, 2]
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True, emoji=False)

    def report(self, match: Match, replacement: str) -> None:
        self.console.print(
            f"[green]{escape(f'[Citation found : {match.start}]')}[/green] "
            f"{escape(repr(match.text))} -> {escape(replacement)}",
            highlight=False,
            soft_wrap=True,
        )
