"""Markdown citation numbering.

Converts citation shorthand to numbered footnote references:
    @Smith2020 and [@Doe2021, @Smith2020]
    ->
    [1] and [2, 1]

Optionally followed by a footnote target list:
    [1] Smith2020
    [2] Doe2021
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdcite.formatter import CitationFormatter, get_formatter
from mdcite.matcher import Match, MatchKind, find_citations
from mdcite.registry import CitationRegistry
from mdcite.trace import CitationTracer


@dataclass
class CitationResult:
    """Rewritten markdown plus the keys it cites, in first-seen order."""

    markdown: str
    registry: CitationRegistry = field(default_factory=CitationRegistry)

    @property
    def keys(self) -> list[str]:
        return self.registry.keys()

    @property
    def citations(self) -> dict[str, int]:
        return self.registry.as_dict()


def _render(match: Match, registry: CitationRegistry, formatter: CitationFormatter) -> str:
    if match.kind is MatchKind.LIST:
        return formatter.render_list([registry.resolve(key) for key in match.keys])
    return formatter.render_bare(registry.resolve(match.keys[0]))


def number_citations(
    markdown: str,
    html: bool = True,
    tracer: CitationTracer | None = None,
) -> CitationResult:
    """Replace every citation with its footnote number.

    Keys are numbered by first appearance, whichever form introduces them.
    ``html`` selects anchor links over bare digits. ``tracer`` only
    observes; output is identical with or without it.
    """
    registry = CitationRegistry()
    if not markdown:
        return CitationResult("", registry)

    formatter = get_formatter(html)
    parts: list[str] = []
    last = 0

    for match in find_citations(markdown):
        replacement = _render(match, registry, formatter)
        if tracer is not None:
            tracer.report(match, replacement)
        parts.append(markdown[last:match.start])
        parts.append(replacement)
        last = match.end

    parts.append(markdown[last:])
    return CitationResult("".join(parts), registry)


def render_footnotes(registry: CitationRegistry, html: bool = True) -> str:
    """Build the numbered list that rich citation links point at."""
    lines = []
    for key, num in registry.items():
        if html:
            lines.append(f'<p>[<a id="fn:{num}">{num}</a>] {key}</p>\n')
        else:
            lines.append(f"[{num}] {key}\n")
    return "".join(lines)
