from .base64 import router as base64_router
from .clipboard import router as clipboard_router
from .cron import router as cron_router
from .diff import router as diff_router
from .files import router as files_router
from .health import router as health_router
from .hmac import router as hmac_router
from .json import router as json_router
from .jwt import router as jwt_router
from .timestamp import router as timestamp_router
from .uuid import router as uuid_router

_routers = [
    health_router,
    base64_router,
    files_router,
    clipboard_router,
    hmac_router,
    jwt_router,
    json_router,
    cron_router,
    timestamp_router,
    uuid_router,
    diff_router,
]

__all__ = ["get_routers"]


def get_routers():
    return _routers
