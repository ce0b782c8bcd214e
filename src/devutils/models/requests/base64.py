from .serde_base import SerdeBase


class EncodeTextRequest(SerdeBase):
    text: str
    url_safe: bool = False


class DecodeTextRequest(SerdeBase):
    text: str
    url_safe: bool = False


class TextResult(SerdeBase):
    result: str


class EncodeFileRequest(SerdeBase):
    file_path: str


class EncodeFileResponse(SerdeBase):
    result: str
    name: str
    size: int
    mime_type: str
    extension: str


class DecodeFileRequest(SerdeBase):
    base64: str
    save_path: str


class DecodeFileResponse(SerdeBase):
    success: bool
    path: str
    size: int


class DataUrlRequest(SerdeBase):
    base64: str
    mime_type: str


class ValidateBase64Request(SerdeBase):
    text: str


class ValidateBase64Response(SerdeBase):
    valid: bool
