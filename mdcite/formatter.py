"""Replacement rendering for numbered citations.

    RichFormatter:   [<a href="#fn:1" class="footnote-ref" role="doc-noteref">1</a>]
    PlainFormatter:  [1]

Both variants bracket the whole group once, so ``@a`` and ``[@a, @b]``
render as ``[1]`` and ``[1, 2]``.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence


def footnote_ref(index: int) -> str:
    """HTML anchor pointing at footnote ``index``."""
    return f'<a href="#fn:{index}" class="footnote-ref" role="doc-noteref">{index}</a>'


class CitationFormatter(abc.ABC):
    """Base renderer; subclasses decide how a single index is labelled."""

    @abc.abstractmethod
    def label(self, index: int) -> str:
        ...

    def render_bare(self, index: int) -> str:
        return f"[{self.label(index)}]"

    def render_list(self, indices: Sequence[int]) -> str:
        return "[" + ", ".join(self.label(i) for i in indices) + "]"


class RichFormatter(CitationFormatter):
    def label(self, index: int) -> str:
        return footnote_ref(index)


class PlainFormatter(CitationFormatter):
    def label(self, index: int) -> str:
        return str(index)


def get_formatter(html: bool = True) -> CitationFormatter:
    return RichFormatter() if html else PlainFormatter()
