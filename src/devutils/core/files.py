import base64
from pathlib import Path

from devutils.core.base64_codec import check_file_size, decode_bytes, sniff_mime_type
from devutils.shared import Config, Logger, load_config

logger = Logger(__name__).get_logger()

config: Config = load_config()

DEFAULT_SAVE_NAME = "output.txt"


def read_file(file_path: str | Path) -> dict:
    """
    Read a file for display.
    Text (or anything we cannot identify) comes back as UTF-8, everything
    else as base64.
    """
    path = Path(file_path)
    size = path.stat().st_size
    check_file_size(size)

    data = path.read_bytes()
    mime_type = sniff_mime_type(data)

    is_text = mime_type is None or mime_type.startswith("text")
    if is_text:
        content = data.decode("utf-8", errors="replace")
    else:
        content = base64.b64encode(data).decode("ascii")

    logger.debug("Read %s (%s, %s bytes)", path, mime_type or "unknown", size)

    return {
        "canceled": False,
        "path": str(path),
        "content": content,
        "type": mime_type or "text/plain",
        "size": size,
    }


def save_file(content: str, filename: str | None = None, binary: bool = False) -> dict:
    if filename:
        path = Path(filename)
    else:
        output_dir = Path(config.paths.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / DEFAULT_SAVE_NAME

    if binary:
        path.write_bytes(decode_bytes(content))
    else:
        path.write_text(content, encoding="utf-8")

    logger.info("Saved file: %s", path)
    return {"canceled": False, "path": str(path)}
