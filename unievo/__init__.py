"""Single-gene evolutionary optimizer."""

from __future__ import annotations

__all__ = ["config", "core", "evolution", "monitoring"]
