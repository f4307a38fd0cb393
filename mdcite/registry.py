"""First-seen citation numbering.

Each key gets the next footnote number the first time it is resolved and
keeps it for the rest of the scan:
    resolve("Smith2020")  ->  1
    resolve("Doe2021")    ->  2
    resolve("Smith2020")  ->  1
"""

from __future__ import annotations

from collections.abc import Iterator


class CitationRegistry:
    """Mapping of citation key to footnote index, in discovery order."""

    def __init__(self) -> None:
        self._indices: dict[str, int] = {}

    def resolve(self, key: str) -> int:
        """Return the index for ``key``, assigning the next one if unseen."""
        index = self._indices.get(key)
        if index is None:
            index = len(self._indices) + 1
            self._indices[key] = index
        return index

    def get(self, key: str) -> int | None:
        return self._indices.get(key)

    def keys(self) -> list[str]:
        """Keys in the order they were first resolved."""
        return list(self._indices)

    def items(self) -> list[tuple[str, int]]:
        return list(self._indices.items())

    def as_dict(self) -> dict[str, int]:
        return dict(self._indices)

    def __contains__(self, key: object) -> bool:
        return key in self._indices

    def __iter__(self) -> Iterator[str]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"CitationRegistry({self._indices!r})"
