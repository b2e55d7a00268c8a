"""
Handset capability record with fallback inheritance.

A handset only stores the capabilities it defines itself. Everything else is
resolved by walking the fallback chain (e.g. desktop browser -> generic web
browser -> generic) until the ``NullHandset`` sentinel answers absent.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Set, Tuple

from wurfl_handsets.core.exceptions import InvalidChainError
from wurfl_handsets.handsets.capability import CapabilitySource, CapabilityValue, ValueAndOwner
from wurfl_handsets.handsets.null_handset import NULL_HANDSET
from wurfl_handsets.logging import get_logger

log = get_logger(__name__)


class Difference(NamedTuple):
    """One entry of ``Handset.compare``: the other handset's value and its owner."""

    key: str
    value: CapabilityValue
    owner: Optional[str]


def _as_text(value: CapabilityValue) -> str:
    # absent renders as the empty string
    return "" if value is None else str(value)


class Handset:
    """
    One device record in a fallback chain.

    ``wurfl_id`` identifies the record; ``user_agent`` is carried for identity
    and equality only. The fallback is a shared, non-owning reference and is
    never ``None``: passing ``None`` substitutes the sentinel.
    """

    def __init__(
        self,
        wurfl_id: str,
        user_agent: Optional[str],
        fallback: Optional[CapabilitySource] = None,
    ) -> None:
        self.wurfl_id = wurfl_id
        self.user_agent = user_agent
        self._capabilities: Dict[str, CapabilityValue] = {}
        self._fallback: CapabilitySource = NULL_HANDSET
        self.fallback = fallback

    # ------------------------------------------------------------------
    # Chain
    # ------------------------------------------------------------------

    @property
    def fallback(self) -> CapabilitySource:
        return self._fallback

    @fallback.setter
    def fallback(self, value: Optional[CapabilitySource]) -> None:
        target = NULL_HANDSET if value is None else value

        if target is self or any(node is self for node in _chain_of(target)):
            log.warning(
                "Rejected fallback %s for %s: chain would cycle",
                getattr(target, "wurfl_id", target),
                self.wurfl_id,
            )
            raise InvalidChainError(
                f"Fallback {getattr(target, 'wurfl_id', target)!r} would make "
                f"the chain of {self.wurfl_id!r} cycle"
            )

        self._fallback = target
        log.debug("Fallback of %s set to %s", self.wurfl_id, getattr(target, "wurfl_id", None))

    def chain(self) -> Iterator["Handset"]:
        """Yield this handset and each ancestor, stopping before the sentinel."""
        node: object = self
        while isinstance(node, Handset):
            yield node
            node = node._fallback

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def overrides(self) -> Mapping[str, CapabilityValue]:
        """Read-only view of the capabilities defined on this record."""
        return MappingProxyType(self._capabilities)

    def is_overridden(self, key: str) -> bool:
        return key in self._capabilities

    def get(self, key: str) -> CapabilityValue:
        if key in self._capabilities:
            return self._capabilities[key]
        return self._fallback.get(key)

    def __getitem__(self, key: str) -> CapabilityValue:
        return self.get(key)

    def get_with_owner(self, key: str) -> ValueAndOwner:
        """
        Resolve ``key`` and report which record in the chain supplied it.

        Returns ``(value, owner_id)``; ``(None, None)`` when nothing in the
        chain defines the key.
        """
        if key in self._capabilities:
            return self._capabilities[key], self.wurfl_id
        return self._fallback.get_with_owner(key)

    def set(self, key: str, value: CapabilityValue) -> None:
        self._capabilities[key] = value

    def __setitem__(self, key: str, value: CapabilityValue) -> None:
        self.set(key, value)

    def keys(self) -> Set[str]:
        return set(self._capabilities) | set(self._fallback.keys())

    def __contains__(self, key: object) -> bool:
        return key in self.keys()

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def items(self) -> Iterator[Tuple[str, CapabilityValue]]:
        """Yield ``(key, resolved value)`` for every key in the chain."""
        for key in self.keys():
            yield key, self.get(key)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        True when ``other`` is a handset with the same id and user agent whose
        resolved values all match this handset's. Use ``compare`` for details.
        """
        if not isinstance(other, Handset):
            return False
        if self.wurfl_id != other.wurfl_id or self.user_agent != other.user_agent:
            return False
        return all(self.get(key) == value for key, value in other.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Handset):
            return NotImplemented
        return self.equals(other)

    def compare(self, other: CapabilitySource) -> List[Difference]:
        """
        List the keys where this handset's local value differs from ``other``.

        For every key in this handset's chain, the value defined locally on this
        record (absent when inherited) is compared as text with ``other``'s
        resolved value. Each difference carries ``other``'s value and the id of
        the record in ``other``'s chain that supplied it.

        Not symmetric: ``a.compare(b)`` walks ``a``'s keys and ``a``'s local
        slots, so swapping the arguments can report a different set of keys.
        """
        differences: List[Difference] = []
        for key in sorted(self.keys()):
            value, owner = other.get_with_owner(key)
            if _as_text(self._capabilities.get(key)) != _as_text(value):
                differences.append(Difference(key, value, owner))
        return differences

    def __repr__(self) -> str:
        return (
            f"Handset(wurfl_id={self.wurfl_id!r}, user_agent={self.user_agent!r}, "
            f"fallback={getattr(self._fallback, 'wurfl_id', None)!r})"
        )


def _chain_of(node: object) -> Iterator[object]:
    chain = getattr(node, "chain", None)
    if callable(chain):
        return iter(chain())
    return iter(())
