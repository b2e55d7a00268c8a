from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from wurfl_handsets.handsets.handset import Handset
from wurfl_handsets.logging import get_logger

log = get_logger(__name__)


@dataclass(slots=True)
class HandsetRegistry:
    """
    In-memory handset store indexed by WURFL id.

    Fallbacks are recorded as ids at registration time and turned into
    references by ``link_fallbacks``, so handsets can be registered in any
    order.
    """
    handsets: Dict[str, Handset] = field(default_factory=dict)
    fallback_ids: Dict[str, Optional[str]] = field(default_factory=dict)

    def register(self, handset: Handset, fallback_id: Optional[str] = None) -> None:
        """
        Index ``handset`` by id. Without ``fallback_id`` the id of the fallback
        the handset already holds is recorded, so linking keeps its chain.
        """
        if fallback_id is None:
            fallback_id = getattr(handset.fallback, "wurfl_id", None)
        if handset.wurfl_id in self.handsets:
            log.warning("Replacing registered handset %s", handset.wurfl_id)
        self.handsets[handset.wurfl_id] = handset
        self.fallback_ids[handset.wurfl_id] = fallback_id

    def get(self, wurfl_id: str) -> Optional[Handset]:
        return self.handsets.get(wurfl_id)

    def find_by_user_agent(self, user_agent: str) -> Optional[Handset]:
        for handset in self.handsets.values():
            if handset.user_agent == user_agent:
                return handset
        return None

    def __contains__(self, wurfl_id: object) -> bool:
        return wurfl_id in self.handsets

    def __len__(self) -> int:
        return len(self.handsets)

    def __iter__(self) -> Iterator[Handset]:
        return iter(self.handsets.values())
