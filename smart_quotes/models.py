from __future__ import annotations

from pydantic import BaseModel, Field

from smart_quotes.states import CollapseStrategy, CurlyQuotePolicy


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    request_id: str | None = None


class TypesetOptions(BaseModel):
    explicit: bool = False
    escape: bool = False
    curly_policy: CurlyQuotePolicy = CurlyQuotePolicy.KEEP
    collapse_strategy: CollapseStrategy = CollapseStrategy.SCAN
    collapse_dashes: bool = True
    collapse_ellipsis: bool = True


class TypesetRequest(BaseModel):
    text: str
    options: TypesetOptions = Field(default_factory=TypesetOptions)


class TypesetResponse(BaseModel):
    text: str
    stats: dict[str, int] = Field(default_factory=dict)


class TypesetDefaultsResponse(BaseModel):
    options: TypesetOptions
    max_text_chars: int
