import base64
import binascii
import json
import time

from cryptography.hazmat.primitives import constant_time, hashes, hmac

from devutils.core.errors import ToolError
from devutils.shared import Logger

logger = Logger(__name__).get_logger()

DEFAULT_ALGORITHM = "HS256"

ALGORITHMS = {
    "HS256": hashes.SHA256,
    "HS384": hashes.SHA384,
    "HS512": hashes.SHA512,
}


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise ToolError("Invalid token encoding") from e


def sign(signing_input: str, secret: str, algorithm: str) -> bytes:
    if not isinstance(algorithm, str) or algorithm not in ALGORITHMS:
        raise ToolError(f"Unsupported JWT algorithm: {algorithm}")

    h = hmac.HMAC(secret.encode("utf-8"), ALGORITHMS[algorithm]())
    h.update(signing_input.encode("ascii"))
    return h.finalize()


def _compact(obj: dict) -> bytes:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def encode(header: dict, payload: dict, secret: str) -> str:
    header = {"alg": DEFAULT_ALGORITHM, "typ": "JWT", **header}
    signing_input = f"{b64url_encode(_compact(header))}.{b64url_encode(_compact(payload))}"
    signature = sign(signing_input, secret, header["alg"])
    return f"{signing_input}.{b64url_encode(signature)}"


def _decode_segment(segment: str, name: str) -> dict:
    try:
        value = json.loads(b64url_decode(segment))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ToolError(f"Invalid token {name}: {e}") from e
    if not isinstance(value, dict):
        raise ToolError(f"Invalid token {name}: expected a JSON object")
    return value


def is_expired(payload: dict, now: float | None = None) -> bool | None:
    exp = payload.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, int | float):
        return None
    return exp <= (time.time() if now is None else now)


def decode(token: str, secret: str) -> dict:
    """
    Decode a token and check its signature against `secret`.
    The header and payload are returned even when the signature is bad,
    only a malformed token raises.
    """
    parts = token.strip().split(".")
    if len(parts) != 3:
        raise ToolError("Invalid token: expected header.payload.signature")

    header_segment, payload_segment, signature_segment = parts
    header = _decode_segment(header_segment, "header")
    payload = _decode_segment(payload_segment, "payload")
    signature = b64url_decode(signature_segment)

    algorithm = header.get("alg", DEFAULT_ALGORITHM)
    is_valid = False
    if isinstance(algorithm, str) and algorithm in ALGORITHMS and secret:
        expected = sign(f"{header_segment}.{payload_segment}", secret, algorithm)
        is_valid = constant_time.bytes_eq(expected, signature)
    else:
        logger.debug("Skipping signature check (alg=%s)", algorithm)

    return {
        "header": header,
        "payload": payload,
        "is_valid": is_valid,
        "expired": is_expired(payload),
    }
