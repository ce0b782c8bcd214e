from .serde_base import SerdeBase


class UuidGenerateRequest(SerdeBase):
    version: str = "v4"
    count: int = 5
    namespace: str | None = None


class UuidGenerateResponse(SerdeBase):
    uuids: list[str]
