"""Clipboard capability used by the form's copy buttons."""

from __future__ import annotations

from typing import Protocol


class ClipboardError(Exception):
    """Copying to the clipboard failed."""


class Clipboard(Protocol):
    """Anything that can receive copied text. May raise ClipboardError or PermissionError."""

    def write_text(self, text: str) -> None: ...


class MemoryClipboard:
    """Clipboard that keeps the last copied text in memory. The form default when no system clipboard is wired in."""

    def __init__(self) -> None:
        self.text: str | None = None

    def write_text(self, text: str) -> None:
        self.text = text
