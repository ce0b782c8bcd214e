from .base64 import (
    DataUrlRequest,
    DecodeFileRequest,
    DecodeFileResponse,
    DecodeTextRequest,
    EncodeFileRequest,
    EncodeFileResponse,
    EncodeTextRequest,
    TextResult,
    ValidateBase64Request,
    ValidateBase64Response,
)
from .clipboard import ClipboardReadResponse, ClipboardWriteRequest, ClipboardWriteResponse
from .cron import CronBuildRequest, CronBuildResponse, CronParseRequest, CronParseResponse
from .diff import DiffRequest, DiffResponse
from .files import ReadFileRequest, ReadFileResponse, SaveFileRequest, SaveFileResponse
from .hmac import HmacGenerateRequest, HmacGenerateResponse, HmacVerifyRequest, HmacVerifyResponse
from .json import (
    JsonAnalyzeResponse,
    JsonFormatRequest,
    JsonSearchRequest,
    JsonSearchResponse,
    JsonTextRequest,
    JsonValidateResponse,
)
from .jwt import JwtDecodeRequest, JwtDecodeResponse, JwtEncodeRequest, JwtEncodeResponse
from .serde_base import SerdeBase
from .timestamp import TimestampConvertRequest, TimestampResponse
from .uuid import UuidGenerateRequest, UuidGenerateResponse

__all__ = [
    "ClipboardReadResponse",
    "ClipboardWriteRequest",
    "ClipboardWriteResponse",
    "CronBuildRequest",
    "CronBuildResponse",
    "CronParseRequest",
    "CronParseResponse",
    "DataUrlRequest",
    "DecodeFileRequest",
    "DecodeFileResponse",
    "DecodeTextRequest",
    "DiffRequest",
    "DiffResponse",
    "EncodeFileRequest",
    "EncodeFileResponse",
    "EncodeTextRequest",
    "HmacGenerateRequest",
    "HmacGenerateResponse",
    "HmacVerifyRequest",
    "HmacVerifyResponse",
    "JsonAnalyzeResponse",
    "JsonFormatRequest",
    "JsonSearchRequest",
    "JsonSearchResponse",
    "JsonTextRequest",
    "JsonValidateResponse",
    "JwtDecodeRequest",
    "JwtDecodeResponse",
    "JwtEncodeRequest",
    "JwtEncodeResponse",
    "ReadFileRequest",
    "ReadFileResponse",
    "SaveFileRequest",
    "SaveFileResponse",
    "SerdeBase",
    "TextResult",
    "TimestampConvertRequest",
    "TimestampResponse",
    "UuidGenerateRequest",
    "UuidGenerateResponse",
    "ValidateBase64Request",
    "ValidateBase64Response",
]
