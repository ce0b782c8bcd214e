from fastapi import APIRouter

from devutils.core import cron_schedule
from devutils.models.requests import (
    CronBuildRequest,
    CronBuildResponse,
    CronParseRequest,
    CronParseResponse,
)
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/cron", tags=["cron"])


@router.post("/parse", response_model=CronParseResponse)
async def parse(data: CronParseRequest):
    """Describe a cron expression and list its upcoming runs."""
    logger.debug("Parsing cron expression: %r", data.expression)

    with tool_error_handler():
        result = cron_schedule.parse(data.expression, data.count, data.start)

    return CronParseResponse(**result)


@router.post("/build", response_model=CronBuildResponse)
async def build(data: CronBuildRequest):
    expression = cron_schedule.build(**data.model_dump())
    return CronBuildResponse(expression=expression)
