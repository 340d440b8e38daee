from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class StringValue(BaseModel):
    kind: Literal["string"] = Field(default="string", frozen=True)
    value: str

    model_config = ConfigDict(frozen=True)
