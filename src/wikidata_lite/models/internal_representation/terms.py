from typing import Optional

from pydantic import BaseModel, ConfigDict


class Term(BaseModel):
    """Label, description or alias in one language"""

    language: str
    value: str

    model_config = ConfigDict(frozen=True)


class Sitelink(BaseModel):
    site: str
    title: str
    badges: list[str] = []
    url: Optional[str] = None

    model_config = ConfigDict(frozen=True)
