from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class EntityValue(BaseModel):
    kind: Literal["entity"] = Field(default="entity", frozen=True)
    value: str
    entity_type: Optional[str] = None
    numeric_id: Optional[int] = None

    model_config = ConfigDict(frozen=True)
