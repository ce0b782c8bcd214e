from .serde_base import SerdeBase


class ReadFileRequest(SerdeBase):
    path: str


class ReadFileResponse(SerdeBase):
    canceled: bool
    path: str
    content: str
    type: str
    size: int


class SaveFileRequest(SerdeBase):
    filename: str | None = None  # defaults to output.txt in the output directory
    content: str
    binary: bool = False  # content is base64


class SaveFileResponse(SerdeBase):
    canceled: bool
    path: str
