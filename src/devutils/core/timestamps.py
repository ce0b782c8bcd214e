import re
from datetime import datetime, timedelta, timezone

from devutils.core.errors import ToolError

UNIX_NUMBER = re.compile(r"[+-]?[0-9]+")
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
LOCAL_FORMAT = "%A, %B {day}, %Y {hour}:%M:%S %p"


def parse_input(text: str) -> datetime | None:
    """
    Interpret user input as an instant.

    Ten digits are unix seconds, 13 to 17 digits are unix milliseconds,
    anything non-numeric is tried as ISO-8601. Returns None otherwise.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return None

    if UNIX_NUMBER.fullmatch(trimmed):
        number = int(trimmed)
        if number <= 0:
            return None
        try:
            if len(trimmed) == 10:
                return EPOCH + timedelta(seconds=number)
            if 13 <= len(trimmed) <= 17:
                return EPOCH + timedelta(milliseconds=number)
        except OverflowError:
            return None
        return None

    try:
        parsed = datetime.fromisoformat(trimmed.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_local(moment: datetime) -> str:
    local = moment.astimezone()
    hour = local.hour % 12 or 12
    return local.strftime(LOCAL_FORMAT.format(day=local.day, hour=hour)) + " Local Time"


def describe(moment: datetime) -> dict:
    utc = moment.astimezone(timezone.utc)
    unix_ms = (utc - EPOCH) // timedelta(milliseconds=1)
    return {
        "iso": utc.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "local": format_local(moment),
        "unix_sec": str(unix_ms // 1000),
        "unix_ms": str(unix_ms),
    }


def convert(text: str, offset: int = 0) -> dict:
    moment = parse_input(text)
    if moment is None:
        raise ToolError("Invalid date input")

    try:
        return describe(moment + timedelta(seconds=offset))
    except OverflowError as e:
        raise ToolError("Date out of range") from e


def now() -> dict:
    return describe(datetime.now(timezone.utc))
