from typing import Any

from pydantic import Field

from .serde_base import SerdeBase


class JsonTextRequest(SerdeBase):
    text: str


class JsonFormatRequest(JsonTextRequest):
    indent: int = Field(default=2, ge=0, le=8)


class JsonSearchRequest(JsonTextRequest):
    query: str


class JsonValidateResponse(SerdeBase):
    valid: bool
    error: str | None = None


class JsonStatsModel(SerdeBase):
    objects: int
    arrays: int
    strings: int
    numbers: int
    booleans: int
    nulls: int
    max_depth: int
    total_keys: int


class JsonAnalyzeResponse(SerdeBase):
    success: bool
    stats: JsonStatsModel | None = None
    error: str | None = None


class JsonSearchHit(SerdeBase):
    path: str
    key: str
    value: Any


class JsonSearchResponse(SerdeBase):
    results: list[JsonSearchHit]
