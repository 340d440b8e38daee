from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from .entity_types import EntityKind
from .statements import Claim
from .terms import Sitelink, Term

FALLBACK_LANGUAGE = "en"

T = TypeVar("T")


def _is_empty(term: Any) -> bool:
    if isinstance(term, Term):
        return not term.value
    return not term


def _pick_language(terms: dict[str, T], language: str) -> Optional[T]:
    """Requested language, then English, then any available language.

    Empty terms are skipped.
    """
    for code in (language, FALLBACK_LANGUAGE):
        term = terms.get(code)
        if term is not None and not _is_empty(term):
            return term
    for term in terms.values():
        if not _is_empty(term):
            return term
    return None


class Entity(BaseModel):
    id: str
    type: Optional[EntityKind] = None
    missing: bool = False
    labels: dict[str, Term] = {}
    descriptions: dict[str, Term] = {}
    aliases: dict[str, list[Term]] = {}
    claims: dict[str, list[Claim]] = {}
    sitelinks: dict[str, Sitelink] = {}
    lastrevid: Optional[int] = None
    modified: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> Optional[EntityKind]:
        return self.type or EntityKind.from_id(self.id)

    def get_label(self, language: str = FALLBACK_LANGUAGE) -> str:
        term = _pick_language(self.labels, language)
        if term is None or not term.value:
            return self.id
        return term.value

    def get_description(self, language: str = FALLBACK_LANGUAGE) -> str:
        term = _pick_language(self.descriptions, language)
        return term.value if term is not None else ""

    def get_aliases(self, language: str = FALLBACK_LANGUAGE) -> list[str]:
        terms = _pick_language(self.aliases, language) or []
        return [term.value for term in terms]

    def sorted_property_ids(self) -> list[str]:
        return sorted(self.claims)

    def sorted_claims(self) -> list[tuple[str, list[Claim]]]:
        """Claim groups ordered by property id; order inside a group is kept"""
        return [(property_id, self.claims[property_id]) for property_id in self.sorted_property_ids()]

    def claim_count(self) -> int:
        return sum(len(claim_list) for claim_list in self.claims.values())

    def referenced_property_ids(self) -> set[str]:
        property_ids = set(self.claims)
        for claim_list in self.claims.values():
            for claim in claim_list:
                property_ids.update(snak.property for snak in claim.iter_snaks() if snak.property)
        return property_ids

    def referenced_item_ids(self) -> set[str]:
        item_ids = set()
        for claim_list in self.claims.values():
            for claim in claim_list:
                for snak in claim.iter_snaks():
                    item_ids.update(snak.referenced_item_ids())
        return item_ids

    def referenced_ids(self) -> set[str]:
        """Every id in claims, qualifiers and references that needs a label"""
        return self.referenced_property_ids() | self.referenced_item_ids()
