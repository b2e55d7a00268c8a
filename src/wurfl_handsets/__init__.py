"""
wurfl_handsets

Device capability records that inherit unset values through a fallback chain.
"""

from wurfl_handsets.core.exceptions import HandsetError, InvalidChainError, UnknownFallbackError
from wurfl_handsets.handsets import NULL_HANDSET, CapabilitySource, Difference, Handset, NullHandset
from wurfl_handsets.registry import HandsetRegistry, link_fallbacks

__all__ = [
    "CapabilitySource",
    "Difference",
    "Handset",
    "HandsetError",
    "HandsetRegistry",
    "InvalidChainError",
    "NULL_HANDSET",
    "NullHandset",
    "UnknownFallbackError",
    "link_fallbacks",
]
