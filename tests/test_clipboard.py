#!/usr/bin/env python3
"""
Test the clipboard endpoints against a fake clipboard.
"""

import pyperclip
import pytest
from fastapi.testclient import TestClient

from devutils.main import app

client = TestClient(app)


@pytest.fixture
def fake_clipboard(monkeypatch):
    board = {"text": ""}

    def copy(text):
        board["text"] = text

    def paste():
        return board["text"]

    monkeypatch.setattr(pyperclip, "copy", copy)
    monkeypatch.setattr(pyperclip, "paste", paste)
    return board


@pytest.fixture
def broken_clipboard(monkeypatch):
    def fail(*args):
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)
    monkeypatch.setattr(pyperclip, "paste", fail)


def test_write_then_read(fake_clipboard):
    response = client.post("/clipboard/write", json={"text": "copied text"})
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert fake_clipboard["text"] == "copied text"

    response = client.post("/clipboard/read")
    assert response.status_code == 200
    assert response.json() == {"text": "copied text"}


def test_write_without_clipboard(broken_clipboard):
    response = client.post("/clipboard/write", json={"text": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "could not find a copy/paste mechanism"}


def test_read_without_clipboard(broken_clipboard):
    response = client.post("/clipboard/read")
    assert response.status_code == 400
    assert "copy/paste mechanism" in response.json()["error"]
