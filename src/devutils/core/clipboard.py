import pyperclip

from devutils.core.errors import ToolError
from devutils.shared import Logger

logger = Logger(__name__).get_logger()


def write(text: str):
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard write failed: %s", e)
        raise ToolError(str(e)) from e


def read() -> str:
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard read failed: %s", e)
        raise ToolError(str(e)) from e
