from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class MonolingualValue(BaseModel):
    kind: Literal["monolingual"] = Field(default="monolingual", frozen=True)
    value: str
    language: str

    model_config = ConfigDict(frozen=True)
