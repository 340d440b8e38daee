from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class UnknownValue(BaseModel):
    """Datavalue whose shape does not match its declared datatype, or an
    unsupported datatype. The raw JSON is kept so it can be rendered and
    serialized back unchanged."""

    kind: Literal["unknown"] = Field(default="unknown", frozen=True)
    value: Any = None
    type: Optional[str] = None

    model_config = ConfigDict(frozen=True)
