from datetime import datetime

from .serde_base import SerdeBase


class CronParseRequest(SerdeBase):
    expression: str
    count: int | None = None
    start: datetime | None = None


class CronParseResponse(SerdeBase):
    expression: str
    description: str
    next_runs: list[str]


class CronBuildRequest(SerdeBase):
    minute: str = "*"
    hour: str = "*"
    day: str = "*"
    month: str = "*"
    weekday: str = "*"


class CronBuildResponse(SerdeBase):
    expression: str
