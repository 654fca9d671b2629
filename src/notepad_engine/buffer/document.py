"""Text storage for the single open document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class TextDocument:
    """Whole-buffer text plus the file it was loaded from.

    ``version`` bumps on every replacement of ``text`` so hosts can tell two
    identical-looking snapshots apart. ``dirty`` tracks changes since the last
    load, save or reset.
    """

    text: str = ""
    path: Optional[str] = None
    version: int = 0
    dirty: bool = False

    def replace_text(self, text: str, *, dirty: bool = True) -> None:
        self.text = text
        self.version += 1
        self.dirty = dirty

    def mark_clean(self) -> None:
        self.dirty = False

    @property
    def is_empty(self) -> bool:
        return not self.text
