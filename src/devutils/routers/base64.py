from fastapi import APIRouter

from devutils.core import base64_codec
from devutils.models.requests import (
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
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/base64", tags=["base64"])


@router.post("/encode", response_model=TextResult)
async def encode(data: EncodeTextRequest):
    logger.debug("Encoding %s chars (url_safe=%s)", len(data.text), data.url_safe)

    with tool_error_handler():
        result = base64_codec.encode_text(data.text, data.url_safe)

    return TextResult(result=result)


@router.post("/decode", response_model=TextResult)
async def decode(data: DecodeTextRequest):
    logger.debug("Decoding %s chars (url_safe=%s)", len(data.text), data.url_safe)

    with tool_error_handler():
        result = base64_codec.decode_text(data.text, data.url_safe)

    return TextResult(result=result)


@router.post("/encode-file", response_model=EncodeFileResponse)
async def encode_file(data: EncodeFileRequest):
    """
    Read a file from disk and return it base64 encoded, with the detected
    MIME type, size and extension.
    """
    logger.debug("Encoding file: %s", data.file_path)

    with tool_error_handler():
        encoded = base64_codec.encode_file(data.file_path)

    logger.info(
        "Encoded %s (%s bytes, %s)", encoded["name"], encoded["size"], encoded["mime_type"]
    )
    return EncodeFileResponse(**encoded)


@router.post("/decode-file", response_model=DecodeFileResponse)
async def decode_file(data: DecodeFileRequest):
    logger.debug("Decoding base64 into: %s", data.save_path)

    with tool_error_handler():
        written = base64_codec.decode_file(data.base64, data.save_path)

    return DecodeFileResponse(**written)


@router.post("/to-data-url", response_model=TextResult)
async def to_data_url(data: DataUrlRequest):
    with tool_error_handler():
        result = base64_codec.to_data_url(data.base64, data.mime_type)

    return TextResult(result=result)


@router.post("/validate", response_model=ValidateBase64Response)
async def validate(data: ValidateBase64Request):
    return ValidateBase64Response(valid=base64_codec.is_valid(data.text))
