"""Compare HTTP media types expressed as structured field items."""
from .media_type import match, negotiate, sort
from .structures import ByteSequence, Item, Token

__all__ = (
    "ByteSequence",
    "Item",
    "Token",
    "match",
    "negotiate",
    "sort",
)
