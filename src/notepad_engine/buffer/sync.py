"""Adapter boundary types for syncing the session with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current document."""

    text: str
    version: int
    title: str
    path: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)


__all__ = ["BufferMirror"]
