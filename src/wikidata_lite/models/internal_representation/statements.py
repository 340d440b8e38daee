from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict

from .ranks import Rank
from .references import Reference
from .snaks import Snak


class Claim(BaseModel):
    id: Optional[str] = None
    mainsnak: Snak
    type: Optional[str] = None
    rank: Rank = Rank.NORMAL
    qualifiers: dict[str, list[Snak]] = {}
    qualifiers_order: list[str] = []
    references: list[Reference] = []

    model_config = ConfigDict(frozen=True)

    @property
    def property_id(self) -> str:
        return self.mainsnak.property

    def iter_qualifiers(self) -> Iterator[Snak]:
        for snak_list in self.qualifiers.values():
            yield from snak_list

    def iter_snaks(self) -> Iterator[Snak]:
        """Main snak, then qualifiers, then reference snaks"""
        yield self.mainsnak
        yield from self.iter_qualifiers()
        for reference in self.references:
            yield from reference.iter_snaks()
