class HandsetError(Exception):
    """Base exception for handset chain failures."""


class InvalidChainError(HandsetError, ValueError):
    """Raised when a fallback assignment would make the chain cycle."""


class UnknownFallbackError(HandsetError, KeyError):
    """Raised when strict linking meets a fallback id missing from the registry."""
