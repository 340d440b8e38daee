from .ranks import Rank
from .snak_types import SnakType
from .entity_types import EntityKind
from .value_kinds import ValueKind
from .values import Value
from .snaks import Snak
from .references import Reference
from .statements import Claim
from .terms import Sitelink, Term
from .entity import Entity
from .search import SearchInfo, SearchMatch, SearchResponse, SearchResult

__all__ = [
    "Rank",
    "SnakType",
    "EntityKind",
    "ValueKind",
    "Value",
    "Snak",
    "Reference",
    "Claim",
    "Sitelink",
    "Term",
    "Entity",
    "SearchInfo",
    "SearchMatch",
    "SearchResponse",
    "SearchResult",
]
