from fastapi import APIRouter

from devutils.core import files
from devutils.models.requests import (
    ReadFileRequest,
    ReadFileResponse,
    SaveFileRequest,
    SaveFileResponse,
)
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/file", tags=["file"])


@router.post("/read", response_model=ReadFileResponse)
async def read_file(data: ReadFileRequest):
    """
    Read a file by path.
    Text files come back as-is, binary files base64 encoded.
    """
    logger.debug("Reading file: %s", data.path)

    with tool_error_handler():
        result = files.read_file(data.path)

    logger.info("Read %s (%s, %s bytes)", result["path"], result["type"], result["size"])
    return ReadFileResponse(**result)


@router.post("/save", response_model=SaveFileResponse)
async def save_file(data: SaveFileRequest):
    logger.debug("Saving file: %s (binary=%s)", data.filename or "<default>", data.binary)

    with tool_error_handler():
        result = files.save_file(data.content, data.filename, data.binary)

    return SaveFileResponse(**result)
