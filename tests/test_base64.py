#!/usr/bin/env python3
"""
Test the base64 text, file and data URL endpoints.
"""

import base64

from fastapi.testclient import TestClient

from devutils.core import base64_codec
from devutils.main import app

client = TestClient(app)

PNG_HEADER = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


def test_encode_text():
    response = client.post("/base64/encode", json={"text": "hello world"})
    assert response.status_code == 200
    assert response.json() == {"result": "aGVsbG8gd29ybGQ="}


def test_encode_text_utf8():
    response = client.post("/base64/encode", json={"text": "héllo ✓"})
    assert response.status_code == 200
    assert base64.b64decode(response.json()["result"]).decode("utf-8") == "héllo ✓"


def test_encode_url_safe_strips_padding():
    response = client.post("/base64/encode", json={"text": "??>>", "urlSafe": True})
    assert response.status_code == 200
    result = response.json()["result"]
    assert "=" not in result
    assert "+" not in result and "/" not in result
    assert result == "Pz8-Pg"


def test_decode_text():
    response = client.post("/base64/decode", json={"text": "aGVsbG8gd29ybGQ="})
    assert response.status_code == 200
    assert response.json() == {"result": "hello world"}


def test_decode_url_safe_without_padding():
    response = client.post("/base64/decode", json={"text": "Pz8-Pg", "urlSafe": True})
    assert response.status_code == 200
    assert response.json()["result"] == "??>>"


def test_decode_ignores_whitespace():
    response = client.post("/base64/decode", json={"text": "aGVs\nbG8g\nd29y bGQ="})
    assert response.status_code == 200
    assert response.json()["result"] == "hello world"


def test_decode_invalid_input():
    response = client.post("/base64/decode", json={"text": "!@#$%^&*()"})
    assert response.status_code == 400
    assert "Invalid base64 input" in response.json()["error"]


def test_decode_non_utf8():
    encoded = base64.b64encode(b"\xff\xfe\xfd").decode()
    response = client.post("/base64/decode", json={"text": encoded})
    assert response.status_code == 400
    assert "UTF-8" in response.json()["error"]


def test_encode_text_too_large(monkeypatch):
    monkeypatch.setattr(base64_codec.limits, "max_encode_chars", 5)
    response = client.post("/base64/encode", json={"text": "123456"})
    assert response.status_code == 400
    assert response.json() == {"error": "Text too large. Max 10MB."}


def test_decode_text_too_large(monkeypatch):
    monkeypatch.setattr(base64_codec.limits, "max_decode_chars", 4)
    response = client.post("/base64/decode", json={"text": "aGVsbG8="})
    assert response.status_code == 400
    assert response.json() == {"error": "Base64 string too large. Max ~10MB."}


class TestFiles:
    """Test encoding files from disk and decoding back to disk."""

    def test_encode_png_file(self, tmp_path):
        image = tmp_path / "pixel.png"
        image.write_bytes(PNG_HEADER)

        response = client.post("/base64/encode-file", json={"filePath": str(image)})
        assert response.status_code == 200

        body = response.json()
        assert body["name"] == "pixel.png"
        assert body["size"] == len(PNG_HEADER)
        assert body["mimeType"] == "image/png"
        assert body["extension"] == ".png"
        assert base64.b64decode(body["result"]) == PNG_HEADER

    def test_encode_text_file_uses_extension(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("plain text")

        response = client.post("/base64/encode-file", json={"filePath": str(notes)})
        assert response.status_code == 200
        assert response.json()["mimeType"] == "text/plain"

    def test_encode_unknown_file_defaults_to_octet_stream(self, tmp_path):
        blob = tmp_path / "blob"
        blob.write_bytes(b"\x01\x02\x03")

        response = client.post("/base64/encode-file", json={"file_path": str(blob)})
        assert response.status_code == 200
        assert response.json()["mimeType"] == "application/octet-stream"

    def test_encode_missing_file(self, tmp_path):
        response = client.post(
            "/base64/encode-file", json={"filePath": str(tmp_path / "missing.bin")}
        )
        assert response.status_code == 400
        assert "No such file or directory" in response.json()["error"]

    def test_encode_file_too_large(self, tmp_path, monkeypatch):
        monkeypatch.setattr(base64_codec.limits, "max_file_size", 10)
        big = tmp_path / "big.bin"
        big.write_bytes(b"A" * 11)

        response = client.post("/base64/encode-file", json={"filePath": str(big)})
        assert response.status_code == 400
        assert response.json()["error"].startswith("File too large (0.00MB).")

    def test_decode_file(self, tmp_path):
        target = tmp_path / "out.bin"
        encoded = base64.b64encode(b"\x00\x01binary\xff").decode()

        response = client.post(
            "/base64/decode-file", json={"base64": encoded, "savePath": str(target)}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "path": str(target), "size": 9}
        assert target.read_bytes() == b"\x00\x01binary\xff"

    def test_decode_file_into_missing_directory(self, tmp_path):
        target = tmp_path / "nope" / "out.bin"
        response = client.post(
            "/base64/decode-file", json={"base64": "AAAA", "savePath": str(target)}
        )
        assert response.status_code == 400
        assert "error" in response.json()


def test_to_data_url():
    response = client.post(
        "/base64/to-data-url", json={"base64": "AAAA", "mimeType": "image/png"}
    )
    assert response.status_code == 200
    assert response.json() == {"result": "data:image/png;base64,AAAA"}


def test_to_data_url_too_large(monkeypatch):
    monkeypatch.setattr(base64_codec.limits, "max_data_url_chars", 3)
    response = client.post(
        "/base64/to-data-url", json={"base64": "AAAA", "mimeType": "image/png"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Image too large for preview. Max 5MB."}


def test_validate():
    assert client.post("/base64/validate", json={"text": "aGVsbG8="}).json() == {"valid": True}
    assert client.post("/base64/validate", json={"text": "aGVs\nbG8="}).json() == {"valid": True}
    assert client.post("/base64/validate", json={"text": "aGVsbG8"}).json() == {"valid": False}
    assert client.post("/base64/validate", json={"text": "a-_b"}).json() == {"valid": False}
