"""File readers and writers: markdown, citation key index."""

from __future__ import annotations

from pathlib import Path

import orjson

from mdcite.registry import CitationRegistry


def read_markdown(path: Path) -> str:
    """Read a markdown file as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def save_markdown(content: str, output_path: Path) -> None:
    """Save markdown content to file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")


def keys_to_json(registry: CitationRegistry) -> bytes:
    """Serialize the key index in first-seen order."""
    payload = {
        "citations": [{"key": key, "index": num} for key, num in registry.items()],
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def save_keys(registry: CitationRegistry, output_path: Path) -> None:
    """Save the citation key index as JSON."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(keys_to_json(registry))
