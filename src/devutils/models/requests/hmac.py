from .serde_base import SerdeBase


class HmacGenerateRequest(SerdeBase):
    message: str = ""
    key: str = ""
    algorithm: str = "sha256"
    output_encoding: str = "hex"  # hex | base64


class HmacVerifyRequest(HmacGenerateRequest):
    signature: str = ""


class HmacGenerateResponse(SerdeBase):
    result: str


class HmacVerifyResponse(SerdeBase):
    verified: bool
