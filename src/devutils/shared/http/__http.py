import logging
from contextlib import contextmanager

from fastapi import HTTPException

from devutils.core.errors import ToolError
from devutils.shared.logger import Logger

__all__ = ["tool_error_handler"]

logger = Logger(__name__, level=logging.DEBUG).get_logger()


@contextmanager
def tool_error_handler(stacklevel=1):
    """Turn a failed tool call into a 400 carrying the error message."""
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except HTTPException:
        raise

    except (ToolError, OSError, ValueError) as e:
        message = _describe(e)
        logger.warning("Failed to process request: %s", message, **kw)
        raise HTTPException(status_code=400, detail=message) from e


def _describe(error: Exception) -> str:
    # OSError's str() carries the errno prefix, the strerror + filename reads better
    if isinstance(error, OSError) and error.strerror:
        if error.filename:
            return f"{error.strerror}: {error.filename}"
        return error.strerror
    return str(error)
