from __future__ import annotations

from typing import AbstractSet, Optional, Protocol, Tuple, runtime_checkable

CapabilityValue = Optional[str]
ValueAndOwner = Tuple[CapabilityValue, Optional[str]]


@runtime_checkable
class CapabilitySource(Protocol):
    """
    Anything a handset can fall back to.

    Implemented by ``Handset`` and the ``NullHandset`` sentinel. ``None`` is the
    absent value; looking up an unknown key never raises.
    """

    def get(self, key: str) -> CapabilityValue:
        ...

    def get_with_owner(self, key: str) -> ValueAndOwner:
        ...

    def keys(self) -> AbstractSet[str]:
        ...
