from fastapi import APIRouter

from devutils.core import timestamps
from devutils.models.requests import TimestampConvertRequest, TimestampResponse
from devutils.shared.http import tool_error_handler

router = APIRouter(prefix="/timestamp", tags=["timestamp"])


@router.post("/convert", response_model=TimestampResponse)
async def convert(data: TimestampConvertRequest):
    with tool_error_handler():
        result = timestamps.convert(data.input, data.offset)

    return TimestampResponse(**result)


@router.get("/now", response_model=TimestampResponse)
async def now():
    return TimestampResponse(**timestamps.now())
