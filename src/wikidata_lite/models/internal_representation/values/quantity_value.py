from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Literal


class QuantityValue(BaseModel):
    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    value: str
    unit: str = "1"
    upper_bound: Optional[str] = None
    lower_bound: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, v: str) -> str:
        if v.startswith("Q"):
            v = "http://www.wikidata.org/entity/" + v
        return v

    @field_validator("value", "upper_bound", "lower_bound")
    @classmethod
    def validate_numeric(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                float(v)
            except ValueError:
                raise ValueError(f"Value must be a valid number, got: {v}")
        return v

    @property
    def unit_id(self) -> Optional[str]:
        """Last path segment of the unit URI, None for dimensionless quantities"""
        unit_id = self.unit.rstrip("/").rsplit("/", 1)[-1]
        if unit_id in DIMENSIONLESS_UNITS:
            return None
        return unit_id


# "1" is the wire sentinel, Q199 is the item for the number one
DIMENSIONLESS_UNITS = frozenset({"", "1", "Q199"})
