from datetime import datetime
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer

from app.core.time import isoformat_utc


class SignalType(StrEnum):
    careers_page = "careers_page"
    blog_or_news = "blog_or_news"
    docs_or_developer_portal = "docs_or_developer_portal"
    pricing_page = "pricing_page"
    product_or_platform = "product_or_platform"


class EnrichRequest(BaseModel):
    url: StrictStr


class SignalOut(BaseModel):
    type: SignalType
    present: bool
    evidence: str | None = None

    model_config = ConfigDict(frozen=True)


class SourceRef(BaseModel):
    type: Literal["website"] = "website"
    url: str

    model_config = ConfigDict(frozen=True)


class EnrichmentResult(BaseModel):
    url: str
    fetched_at: datetime = Field(alias="fetchedAt")
    summary: str
    what_they_do: list[str] = Field(alias="whatTheyDo")
    keywords: list[str]
    signals: list[SignalOut]
    sources: list[SourceRef]

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_serializer("fetched_at")
    def serialize_fetched_at(self, value: datetime) -> str:
        return isoformat_utc(value)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
