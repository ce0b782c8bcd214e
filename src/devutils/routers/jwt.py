from fastapi import APIRouter

from devutils.core import ToolError, jwt_token
from devutils.models.requests import (
    JwtDecodeRequest,
    JwtDecodeResponse,
    JwtEncodeRequest,
    JwtEncodeResponse,
)
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/jwt", tags=["jwt"])


@router.post("/encode", response_model=JwtEncodeResponse)
async def encode(data: JwtEncodeRequest):
    logger.debug("Encoding JWT (alg=%s)", data.header.get("alg", jwt_token.DEFAULT_ALGORITHM))

    with tool_error_handler():
        token = jwt_token.encode(data.header, data.payload, data.secret)

    return JwtEncodeResponse(success=True, token=token)


@router.post("/decode", response_model=JwtDecodeResponse)
async def decode_and_validate(data: JwtDecodeRequest):
    """
    Decode a token and check its signature.
    A malformed token is reported in-band with success=false.
    """
    try:
        decoded = jwt_token.decode(data.token, data.secret)
    except ToolError as e:
        logger.warning("Failed to decode JWT: %s", e)
        return JwtDecodeResponse(success=False, error=str(e))

    logger.info("Decoded JWT, signature %s", "valid" if decoded["is_valid"] else "invalid")
    return JwtDecodeResponse(success=True, **decoded)
