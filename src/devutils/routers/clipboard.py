from fastapi import APIRouter

from devutils.core import clipboard
from devutils.models.requests import (
    ClipboardReadResponse,
    ClipboardWriteRequest,
    ClipboardWriteResponse,
)
from devutils.shared.http import tool_error_handler

router = APIRouter(prefix="/clipboard", tags=["clipboard"])


@router.post("/write", response_model=ClipboardWriteResponse)
async def write(data: ClipboardWriteRequest):
    with tool_error_handler():
        clipboard.write(data.text)

    return ClipboardWriteResponse(success=True)


@router.post("/read", response_model=ClipboardReadResponse)
async def read():
    with tool_error_handler():
        text = clipboard.read()

    return ClipboardReadResponse(text=text)
