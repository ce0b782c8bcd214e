from fastapi import APIRouter

from devutils.core import text_diff
from devutils.models.requests import DiffRequest, DiffResponse
from devutils.shared import Logger

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/diff", tags=["diff"])


@router.post("/compare", response_model=DiffResponse)
async def compare(data: DiffRequest):
    result = text_diff.compare(
        data.original,
        data.modified,
        ignore_whitespace=data.ignore_whitespace,
        context=data.context,
    )
    logger.debug("Diff: +%s -%s", result["added"], result["removed"])
    return DiffResponse(**result)
