from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict

from .snaks import Snak


class Reference(BaseModel):
    hash: Optional[str] = None
    snaks: dict[str, list[Snak]] = {}
    snaks_order: list[str] = []

    model_config = ConfigDict(frozen=True)

    def iter_snaks(self) -> Iterator[Snak]:
        for snak_list in self.snaks.values():
            yield from snak_list
