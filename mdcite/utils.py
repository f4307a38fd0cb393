"""Utility functions for mdcite."""

from __future__ import annotations

from pathlib import Path


def resolve_output(markdown: Path, output: str | None) -> Path:
    """Pick the file to write: explicit output, or the input itself."""
    if not output:
        return markdown
    out = Path(output)
    if out.is_dir() or output.endswith("/"):
        return out / markdown.name
    return out
