from .exceptions import HandsetError, InvalidChainError, UnknownFallbackError

__all__ = [
    "HandsetError",
    "InvalidChainError",
    "UnknownFallbackError",
]
