from __future__ import annotations

from typing import Dict, Optional

from wurfl_handsets.config import get_config
from wurfl_handsets.core.exceptions import InvalidChainError, UnknownFallbackError
from wurfl_handsets.handsets.capability import CapabilitySource
from wurfl_handsets.handsets.handset import Handset
from wurfl_handsets.logging import get_logger
from wurfl_handsets.registry.entities import HandsetRegistry

log = get_logger(__name__)


def _resolve(registry: HandsetRegistry, strict: bool) -> Dict[str, Optional[Handset]]:
    resolved: Dict[str, Optional[Handset]] = {}
    for wurfl_id, fallback_id in registry.fallback_ids.items():
        if not fallback_id:
            resolved[wurfl_id] = None
            continue

        fallback = registry.get(fallback_id)
        if fallback is None:
            if strict:
                raise UnknownFallbackError(fallback_id)
            log.warning("Handset %s falls back to unknown id %s", wurfl_id, fallback_id)
        resolved[wurfl_id] = fallback
    return resolved


def _assign(registry: HandsetRegistry, fallbacks: Dict[str, Optional[CapabilitySource]]) -> None:
    # detach first so links can be rebuilt in any order
    for handset in registry:
        handset.fallback = None
    for wurfl_id, fallback in fallbacks.items():
        registry.handsets[wurfl_id].fallback = fallback


def link_fallbacks(registry: HandsetRegistry, strict: Optional[bool] = None) -> None:
    """
    Resolve registered fallback ids into handset references.

    Idempotent:
      - every fallback is reset to the sentinel before links are rebuilt

    All or nothing:
      - ids are resolved before any handset is touched
      - a link that would cycle raises ``InvalidChainError`` after the previous
        fallbacks are restored

    Unknown fallback ids stay on the sentinel with a warning, or raise
    ``UnknownFallbackError`` when ``strict`` (default: ``registry.strict_links``
    from config).
    """
    if strict is None:
        strict = get_config().strict_links

    resolved = _resolve(registry, strict)
    previous = {handset.wurfl_id: handset.fallback for handset in registry}

    try:
        _assign(registry, resolved)
    except InvalidChainError:
        log.warning("Restoring previous fallbacks after rejected link")
        _assign(registry, previous)
        raise

    linked = sum(1 for fallback in resolved.values() if fallback is not None)
    log.info("Linked %d of %d handsets to their fallbacks", linked, len(registry))
