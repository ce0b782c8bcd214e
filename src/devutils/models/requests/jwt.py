from typing import Any

from .serde_base import SerdeBase


class JwtEncodeRequest(SerdeBase):
    header: dict[str, Any] = {}
    payload: dict[str, Any]
    secret: str


class JwtEncodeResponse(SerdeBase):
    success: bool
    token: str


class JwtDecodeRequest(SerdeBase):
    token: str
    secret: str = ""


class JwtDecodeResponse(SerdeBase):
    success: bool
    header: dict[str, Any] | None = None
    payload: dict[str, Any] | None = None
    is_valid: bool | None = None
    expired: bool | None = None
    error: str | None = None
