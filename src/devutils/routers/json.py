from fastapi import APIRouter

from devutils.core import ToolError, json_stats
from devutils.models.requests import (
    JsonAnalyzeResponse,
    JsonFormatRequest,
    JsonSearchRequest,
    JsonSearchResponse,
    JsonTextRequest,
    JsonValidateResponse,
    TextResult,
)
from devutils.shared import Logger
from devutils.shared.http import tool_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter(prefix="/json", tags=["json"])


@router.post("/validate", response_model=JsonValidateResponse)
async def validate(data: JsonTextRequest):
    error = json_stats.validation_error(data.text)
    return JsonValidateResponse(valid=error is None, error=error)


@router.post("/analyze", response_model=JsonAnalyzeResponse)
async def analyze(data: JsonTextRequest):
    try:
        parsed = json_stats.parse(data.text)
    except ToolError as e:
        logger.warning("Failed to analyze JSON: %s", e)
        return JsonAnalyzeResponse(success=False, error=str(e))

    stats = json_stats.analyze(parsed)
    logger.debug("JSON stats: %s", stats)
    return JsonAnalyzeResponse(success=True, stats=stats.as_dict())


@router.post("/format", response_model=TextResult)
async def format_json(data: JsonFormatRequest):
    with tool_error_handler():
        result = json_stats.format_text(data.text, data.indent)

    return TextResult(result=result)


@router.post("/minify", response_model=TextResult)
async def minify(data: JsonTextRequest):
    with tool_error_handler():
        result = json_stats.minify_text(data.text)

    return TextResult(result=result)


@router.post("/search", response_model=JsonSearchResponse)
async def search(data: JsonSearchRequest):
    with tool_error_handler():
        parsed = json_stats.parse(data.text)

    results = json_stats.search(parsed, data.query)
    logger.debug("Search for %r matched %s members", data.query, len(results))
    return JsonSearchResponse(results=results)
