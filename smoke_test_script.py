#!/usr/bin/env python3
"""
Smoke test against a running devutils server.
Round-trips a file through the base64 endpoints and signs/verifies with
HMAC and JWT.
"""

import json
from pathlib import Path

import requests

# Configuration
BASE_URL = "http://127.0.0.1:8000"
TEST_FILE_PATH = Path("smoke_test_file.txt")
DECODED_FILE_PATH = Path("decoded_smoke_test_file.txt")


def create_test_file():
    """Create a test file for encoding."""
    content = "Hello, World! This is a test file for the base64 endpoints.\n" * 10
    TEST_FILE_PATH.write_text(content)
    print(f"Created test file: {TEST_FILE_PATH}")


def post(path, payload=None):
    response = requests.post(f"{BASE_URL}{path}", json=payload or {})
    try:
        body = response.json()
    except json.JSONDecodeError:
        print(f"{path} -> {response.status_code} (not JSON): {response.text}")
        return None

    if response.status_code != 200:
        print(f"{path} -> {response.status_code}: {body.get('error')}")
        return None
    return body


def check_file_round_trip():
    """Encode a file, decode it back to disk and compare."""
    print("\n=== Testing File Round Trip ===")

    encoded = post("/base64/encode-file", {"filePath": str(TEST_FILE_PATH.absolute())})
    if not encoded:
        return False
    print(f"Encoded {encoded['name']} ({encoded['size']} bytes, {encoded['mimeType']})")

    decoded = post(
        "/base64/decode-file",
        {"base64": encoded["result"], "savePath": str(DECODED_FILE_PATH.absolute())},
    )
    if not decoded:
        return False

    if TEST_FILE_PATH.read_bytes() == DECODED_FILE_PATH.read_bytes():
        print("✅ File integrity verified - original and decoded files match!")
        return True

    print("❌ File integrity check failed - files don't match!")
    return False


def check_hmac():
    print("\n=== Testing HMAC ===")
    request = {"message": "hello", "key": "secret", "algorithm": "sha256"}

    generated = post("/hmac/generate", request)
    if not generated:
        return False
    print(f"Signature: {generated['result']}")

    verified = post("/hmac/verify", {**request, "signature": generated["result"]})
    return bool(verified and verified["verified"])


def check_jwt():
    print("\n=== Testing JWT ===")
    encoded = post("/jwt/encode", {"payload": {"sub": "smoke"}, "secret": "secret"})
    if not encoded:
        return False
    print(f"Token: {encoded['token']}")

    decoded = post("/jwt/decode", {"token": encoded["token"], "secret": "secret"})
    return bool(decoded and decoded["isValid"])


def main():
    print("🚀 Starting devutils smoke test")

    create_test_file()

    results = {
        "file round trip": check_file_round_trip(),
        "hmac": check_hmac(),
        "jwt": check_jwt(),
    }

    TEST_FILE_PATH.unlink(missing_ok=True)
    DECODED_FILE_PATH.unlink(missing_ok=True)

    for name, passed in results.items():
        print(f"{'✅' if passed else '❌'} {name}")

    print("\n✅ Smoke test completed!")


if __name__ == "__main__":
    main()
