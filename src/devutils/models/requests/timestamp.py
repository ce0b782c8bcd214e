from .serde_base import SerdeBase


class TimestampConvertRequest(SerdeBase):
    input: str
    offset: int = 0  # seconds


class TimestampResponse(SerdeBase):
    iso: str
    local: str
    unix_sec: str
    unix_ms: str
