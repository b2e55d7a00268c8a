from __future__ import annotations

from .entities import HandsetRegistry
from .link_fallbacks import link_fallbacks

__all__ = [
    "HandsetRegistry",
    "link_fallbacks",
]
