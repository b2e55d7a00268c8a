from __future__ import annotations

from .capability import CapabilitySource, CapabilityValue, ValueAndOwner
from .handset import Difference, Handset
from .null_handset import NULL_HANDSET, NullHandset

__all__ = [
    "CapabilitySource",
    "CapabilityValue",
    "Difference",
    "Handset",
    "NULL_HANDSET",
    "NullHandset",
    "ValueAndOwner",
]
