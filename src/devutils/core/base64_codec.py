import base64
import binascii
import mimetypes
import re
from pathlib import Path

import filetype

from devutils.core.errors import ToolError
from devutils.shared import Config, Logger, load_config

logger = Logger(__name__).get_logger()

config: Config = load_config()
limits = config.limits

BASE64_PATTERN = re.compile(
    r"^([A-Za-z0-9+/]{4})*([A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{2}==)?$"
)
WHITESPACE = re.compile(r"\s")

DEFAULT_MIME_TYPE = "application/octet-stream"


def megabytes(size: int) -> str:
    return f"{size / 1024 / 1024:.2f}MB"


def encode_text(text: str, url_safe: bool = False) -> str:
    if len(text) > limits.max_encode_chars:
        raise ToolError("Text too large. Max 10MB.")

    data = text.encode("utf-8")
    if url_safe:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    return base64.b64encode(data).decode("ascii")


def decode_bytes(text: str, url_safe: bool = False) -> bytes:
    """Lenient decode: whitespace is dropped and padding restored."""
    cleaned = WHITESPACE.sub("", text)
    if url_safe:
        cleaned = cleaned.replace("-", "+").replace("_", "/")
    cleaned = cleaned.rstrip("=")
    cleaned += "=" * (-len(cleaned) % 4)

    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as e:
        raise ToolError(f"Invalid base64 input: {e}") from e


def decode_text(text: str, url_safe: bool = False) -> str:
    if len(text) > limits.max_decode_chars:
        raise ToolError("Base64 string too large. Max ~10MB.")

    data = decode_bytes(text, url_safe)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ToolError("Decoded data is not valid UTF-8 text") from e


def is_valid(text: str) -> bool:
    return BASE64_PATTERN.match(WHITESPACE.sub("", text)) is not None


def sniff_mime_type(data: bytes, file_name: str | None = None) -> str | None:
    """Content first, then the file name. None when neither says anything."""
    kind = filetype.guess(data)
    if kind is not None:
        return kind.mime
    if file_name:
        guessed, _ = mimetypes.guess_type(file_name)
        return guessed
    return None


def check_file_size(size: int):
    if size > limits.max_file_size:
        raise ToolError(
            f"File too large ({megabytes(size)}). "
            f"Max {limits.max_file_size // 1024 // 1024}MB."
        )


def encode_file(file_path: str | Path) -> dict:
    path = Path(file_path)
    size = path.stat().st_size
    check_file_size(size)

    data = path.read_bytes()
    logger.debug("Read %s bytes from %s", len(data), path)

    return {
        "result": base64.b64encode(data).decode("ascii"),
        "name": path.name,
        "size": size,
        "mime_type": sniff_mime_type(data, path.name) or DEFAULT_MIME_TYPE,
        "extension": path.suffix,
    }


def decode_file(encoded: str, save_path: str | Path) -> dict:
    path = Path(save_path)
    data = decode_bytes(encoded)
    path.write_bytes(data)
    logger.info("Wrote %s decoded bytes to %s", len(data), path)

    return {"success": True, "path": str(path), "size": path.stat().st_size}


def to_data_url(encoded: str, mime_type: str) -> str:
    if len(encoded) > limits.max_data_url_chars:
        raise ToolError("Image too large for preview. Max 5MB.")
    return f"data:{mime_type};base64,{encoded}"
