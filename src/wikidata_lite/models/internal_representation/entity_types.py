from enum import Enum
from typing import Optional


class EntityKind(str, Enum):
    ITEM = "item"
    PROPERTY = "property"
    LEXEME = "lexeme"

    @classmethod
    def from_id(cls, entity_id: str) -> Optional["EntityKind"]:
        """Map an id prefix (Q/P/L) to its entity kind"""
        prefix = entity_id[:1].upper()
        return ID_PREFIXES.get(prefix)


ID_PREFIXES = {
    "Q": EntityKind.ITEM,
    "P": EntityKind.PROPERTY,
    "L": EntityKind.LEXEME,
}
