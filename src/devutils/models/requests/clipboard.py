from .serde_base import SerdeBase


class ClipboardWriteRequest(SerdeBase):
    text: str


class ClipboardWriteResponse(SerdeBase):
    success: bool


class ClipboardReadResponse(SerdeBase):
    text: str
