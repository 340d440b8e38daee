from typing import Optional

from pydantic import BaseModel, ConfigDict

from .snak_types import SnakType
from .values import EntityValue, QuantityValue, Value


class Snak(BaseModel):
    snaktype: SnakType
    property: str
    datatype: Optional[str] = None
    value: Optional[Value] = None
    datavalue_type: Optional[str] = None
    hash: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_value(self) -> bool:
        return self.snaktype == SnakType.VALUE and self.value is not None

    @property
    def entity_id(self) -> Optional[str]:
        """Id of the referenced entity for entity-valued snaks"""
        if isinstance(self.value, EntityValue):
            return self.value.value
        return None

    def referenced_item_ids(self) -> list[str]:
        """Entity ids this snak's value points at, including quantity units"""
        if isinstance(self.value, EntityValue):
            return [self.value.value]
        if isinstance(self.value, QuantityValue) and self.value.unit_id:
            return [self.value.unit_id]
        return []
