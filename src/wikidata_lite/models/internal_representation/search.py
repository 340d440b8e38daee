from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchMatch(BaseModel):
    type: Optional[str] = None
    language: Optional[str] = None
    text: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SearchResult(BaseModel):
    id: str
    title: Optional[str] = None
    pageid: Optional[int] = None
    repository: Optional[str] = None
    url: Optional[str] = None
    concepturi: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    match: Optional[SearchMatch] = None
    aliases: list[str] = []

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def display_label(self) -> str:
        return self.label or self.id


class SearchInfo(BaseModel):
    search: Optional[str] = None
    totalhits: Optional[int] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class SearchResponse(BaseModel):
    success: bool = False
    search: list[SearchResult] = []
    searchinfo: Optional[SearchInfo] = None
    search_continue: Optional[int] = Field(default=None, alias="search-continue")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
