# chromakit/colors/_view_cache.py
"""Cache reuse logic for views derived from a packed color."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CachedView(Generic[V]):
    source: int  # packed color the view was derived from
    value: V


def get_reusable_view(cached: Optional[CachedView[V]], color: int) -> Optional[V]:
    """Return the cached view if it was derived from ``color``, else None."""
    if cached is None:
        return None

    if cached.source != color:
        return None

    return cached.value
