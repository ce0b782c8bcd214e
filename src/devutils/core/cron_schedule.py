from datetime import datetime, timezone

from cron_descriptor import (
    FormatException,
    MissingFieldException,
    WrongArgumentException,
    get_description,
)
from croniter import CroniterError, croniter

from devutils.core.errors import ToolError
from devutils.shared import Config, Logger, load_config

logger = Logger(__name__).get_logger()

config: Config = load_config()

CRON_FIELDS = ("minute", "hour", "day", "month", "weekday")


def describe(expression: str) -> str:
    try:
        return get_description(expression)
    except (FormatException, MissingFieldException, WrongArgumentException, ValueError) as e:
        raise ToolError(f"Invalid cron expression: {e}") from e


def next_runs(expression: str, count: int | None = None, start: datetime | None = None) -> list[datetime]:
    count = config.cron.default_runs if count is None else count
    if not 1 <= count <= config.cron.max_runs:
        raise ToolError(f"Run count must be between 1 and {config.cron.max_runs}")

    start = start or datetime.now(timezone.utc)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)

    try:
        # Six fields put seconds first, as cron-descriptor reads them
        schedule = croniter(expression, start, second_at_beginning=True)
    except (CroniterError, ValueError) as e:
        raise ToolError(f"Invalid cron expression: {e}") from e

    return [schedule.get_next(datetime) for _ in range(count)]


def parse(expression: str, count: int | None = None, start: datetime | None = None) -> dict:
    expression = expression.strip()
    if not expression:
        raise ToolError("Cron expression is required")

    runs = next_runs(expression, count, start)
    logger.debug("Parsed cron %r, first run %s", expression, runs[0])
    return {
        "expression": expression,
        "description": describe(expression),
        "next_runs": [run.isoformat() for run in runs],
    }


def build(**fields: str | None) -> str:
    return " ".join((fields.get(name) or "*").strip() or "*" for name in CRON_FIELDS)
