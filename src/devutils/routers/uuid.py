from fastapi import APIRouter

from devutils.core import uuids
from devutils.models.requests import UuidGenerateRequest, UuidGenerateResponse
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/uuid", tags=["uuid"])


@router.post("/generate", response_model=UuidGenerateResponse)
async def generate(data: UuidGenerateRequest):
    logger.debug("Generating %s %s UUIDs", data.count, data.version)

    with tool_error_handler():
        result = uuids.generate(data.version, data.count, data.namespace)

    return UuidGenerateResponse(uuids=result)
