"""mdcite - numbered citations for markdown."""

from mdcite.citations import CitationResult, number_citations, render_footnotes
from mdcite.registry import CitationRegistry

__version__ = "0.1.0"

__all__ = [
    "CitationRegistry",
    "CitationResult",
    "number_citations",
    "render_footnotes",
]
