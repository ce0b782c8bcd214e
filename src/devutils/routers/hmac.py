from fastapi import APIRouter

from devutils.core import hmac_sign
from devutils.models.requests import (
    HmacGenerateRequest,
    HmacGenerateResponse,
    HmacVerifyRequest,
    HmacVerifyResponse,
)
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/hmac", tags=["hmac"])


@router.post("/generate", response_model=HmacGenerateResponse)
async def generate(data: HmacGenerateRequest):
    logger.debug("Generating HMAC-%s (%s)", data.algorithm, data.output_encoding)

    with tool_error_handler():
        result = hmac_sign.generate(
            data.message, data.key, data.algorithm, data.output_encoding
        )

    return HmacGenerateResponse(result=result)


@router.post("/verify", response_model=HmacVerifyResponse)
async def verify(data: HmacVerifyRequest):
    logger.debug("Verifying HMAC-%s (%s)", data.algorithm, data.output_encoding)

    with tool_error_handler():
        verified = hmac_sign.verify(
            data.message,
            data.key,
            data.signature,
            data.algorithm,
            data.output_encoding,
        )

    logger.info("HMAC verification %s", "passed" if verified else "failed")
    return HmacVerifyResponse(verified=verified)
