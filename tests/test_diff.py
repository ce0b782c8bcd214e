#!/usr/bin/env python3
"""
Test line diffs between two texts.
"""

from fastapi.testclient import TestClient

from devutils.core import text_diff
from devutils.main import app

client = TestClient(app)

ORIGINAL = "alpha\nbeta\ngamma\n"
MODIFIED = "alpha\nBETA\ngamma\ndelta\n"


def test_compare():
    response = client.post("/diff/compare", json={"original": ORIGINAL, "modified": MODIFIED})
    assert response.status_code == 200

    body = response.json()
    assert body["identical"] is False
    assert body["added"] == 2
    assert body["removed"] == 1
    assert body["hunks"][0] == {
        "tag": "replace",
        "originalStart": 2,
        "originalEnd": 2,
        "modifiedStart": 2,
        "modifiedEnd": 2,
        "originalLines": ["beta"],
        "modifiedLines": ["BETA"],
    }
    assert body["hunks"][1]["tag"] == "insert"
    assert body["hunks"][1]["modifiedLines"] == ["delta"]
    assert body["unified"].startswith("--- original\n+++ modified\n@@")
    assert "-beta" in body["unified"]
    assert "+BETA" in body["unified"]


def test_identical_texts():
    result = text_diff.compare(ORIGINAL, ORIGINAL)
    assert result["identical"] is True
    assert result["hunks"] == []
    assert result["unified"] == ""


def test_ignore_whitespace():
    result = text_diff.compare("a  b\nc", "a b\n  c", ignore_whitespace=True)
    assert result["identical"] is True

    result = text_diff.compare("a  b\nc", "a b\n  c")
    assert result["identical"] is False
    assert result["removed"] == 2


def test_deleted_lines():
    result = text_diff.compare("one\ntwo\nthree", "one\nthree")
    assert result["removed"] == 1
    assert result["added"] == 0
    assert result["hunks"][0]["tag"] == "delete"
    assert result["hunks"][0]["original_start"] == 2


def test_negative_context_rejected():
    response = client.post(
        "/diff/compare", json={"original": "a", "modified": "b", "context": -1}
    )
    assert response.status_code == 422
    assert "context" in response.json()["error"]
