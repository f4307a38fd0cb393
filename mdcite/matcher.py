"""Citation pattern matching.

Two markdown citation forms are recognised (across line breaks):
    @letters2025
    [@letters2025]
    [@letters2025, @moreletters2025]

A bracket group holding an ``@`` that is not a well-formed list, such as
``[@a, b]``, is not a citation and is left as literal text.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

KEY = r"[A-Za-z0-9]+"

# List form must come first so keys inside brackets are not matched bare.
# Malformed groups are consumed next so their keys are never matched bare either.
CITATION_PATTERN = re.compile(
    rf"(?P<list>\[\s*@{KEY}\s*(?:,\s*@{KEY}\s*)*\])"
    r"|(?P<malformed>\[[^\[\]]*@[^\[\]]*\])"
    rf"|@(?P<key>{KEY})"
)


class MatchKind(enum.Enum):
    BARE = "bare"
    LIST = "list"


@dataclass(frozen=True)
class Match:
    """A citation found in the source text."""

    start: int
    end: int
    text: str
    kind: MatchKind
    keys: tuple[str, ...]


def split_citation_list(raw: str) -> tuple[str, ...]:
    """Split ``[@a, @b]`` into its keys, trimmed and without the ``@``."""
    inner = raw[1:-1]
    return tuple(part.strip()[1:] for part in inner.split(","))


def find_citations(text: str) -> Iterator[Match]:
    """Yield citation matches in left-to-right order."""
    for m in CITATION_PATTERN.finditer(text):
        if m.group("malformed") is not None:
            continue
        raw = m.group(0)
        if m.group("list") is not None:
            yield Match(m.start(), m.end(), raw, MatchKind.LIST, split_citation_list(raw))
        else:
            yield Match(m.start(), m.end(), raw, MatchKind.BARE, (m.group("key"),))
