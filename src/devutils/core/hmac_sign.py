import base64

from cryptography.hazmat.primitives import constant_time, hashes, hmac

from devutils.core.errors import ToolError
from devutils.shared import Logger

logger = Logger(__name__).get_logger()

ALGORITHMS = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}


def get_hash_algorithm(algorithm: str) -> hashes.HashAlgorithm:
    try:
        return ALGORITHMS[algorithm.lower()]()
    except KeyError as e:
        raise ToolError(f"Unsupported HMAC algorithm: {algorithm}") from e


def digest(message: str, key: str, algorithm: str) -> bytes:
    h = hmac.HMAC(key.encode("utf-8"), get_hash_algorithm(algorithm))
    h.update(message.encode("utf-8"))
    return h.finalize()


def encode_output(raw: bytes, output_encoding: str = "hex") -> str:
    if output_encoding == "base64":
        return base64.b64encode(raw).decode("ascii")
    return raw.hex()


def generate(message: str, key: str, algorithm: str = "sha256", output_encoding: str = "hex") -> str:
    if not message or not key:
        raise ToolError("Message and key are required")

    return encode_output(digest(message, key, algorithm), output_encoding)


def verify(
    message: str,
    key: str,
    signature: str,
    algorithm: str = "sha256",
    output_encoding: str = "hex",
) -> bool:
    if not message or not key or not signature:
        raise ToolError("Message, key, and signature are required")

    expected = encode_output(digest(message, key, algorithm), output_encoding)
    verified = constant_time.bytes_eq(expected.encode("ascii"), signature.encode("utf-8"))

    if not verified:
        logger.debug("HMAC mismatch for %s/%s", algorithm, output_encoding)
    return verified
