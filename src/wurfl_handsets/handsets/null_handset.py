from __future__ import annotations

from typing import FrozenSet, Iterator

from wurfl_handsets.handsets.capability import CapabilityValue, ValueAndOwner

_EMPTY: FrozenSet[str] = frozenset()


class NullHandset:
    """
    Terminal node of every fallback chain.

    Stateless and shared: ``NullHandset()`` always returns the same instance.
    Every lookup answers absent and the key set is empty.
    """

    __slots__ = ()
    _instance: "NullHandset | None" = None

    def __new__(cls) -> "NullHandset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("NullHandset is immutable")

    def get(self, key: str) -> CapabilityValue:
        return None

    def __getitem__(self, key: str) -> CapabilityValue:
        return None

    def get_with_owner(self, key: str) -> ValueAndOwner:
        return None, None

    def keys(self) -> FrozenSet[str]:
        return _EMPTY

    def __contains__(self, key: object) -> bool:
        return False

    def chain(self) -> Iterator["NullHandset"]:
        return iter(())

    def __repr__(self) -> str:
        return "NullHandset()"


NULL_HANDSET = NullHandset()
