#!/usr/bin/env python3
"""
Test UUID generation for each supported version.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from devutils.main import app

client = TestClient(app)

NAMESPACE = str(uuid.NAMESPACE_DNS)


@pytest.mark.parametrize("version, number", [("v1", 1), ("v4", 4)])
def test_random_versions(version, number):
    response = client.post("/uuid/generate", json={"version": version, "count": 3})
    assert response.status_code == 200

    uuids = response.json()["uuids"]
    assert len(uuids) == 3
    assert len(set(uuids)) == 3
    assert all(uuid.UUID(value).version == number for value in uuids)


def test_default_is_five_v4():
    uuids = client.post("/uuid/generate", json={}).json()["uuids"]
    assert len(uuids) == 5
    assert uuid.UUID(uuids[0]).version == 4


@pytest.mark.parametrize("version, make", [("v3", uuid.uuid3), ("v5", uuid.uuid5)])
def test_name_based_versions_are_deterministic(version, make):
    response = client.post(
        "/uuid/generate",
        json={"version": version, "count": 2, "namespace": NAMESPACE},
    )
    assert response.status_code == 200
    assert response.json()["uuids"] == [
        str(make(uuid.NAMESPACE_DNS, "name-0")),
        str(make(uuid.NAMESPACE_DNS, "name-1")),
    ]


def test_namespace_required():
    response = client.post("/uuid/generate", json={"version": "v5", "count": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Namespace required for v5 UUIDs!"}


def test_invalid_namespace():
    response = client.post(
        "/uuid/generate", json={"version": "v3", "namespace": "not-a-uuid"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid namespace UUID: not-a-uuid"}


def test_unsupported_version():
    response = client.post("/uuid/generate", json={"version": "v7"})
    assert response.status_code == 400
    assert response.json() == {"error": "Unsupported UUID version: v7"}


@pytest.mark.parametrize("count", [0, 1001])
def test_count_bounds(count):
    response = client.post("/uuid/generate", json={"count": count})
    assert response.status_code == 400
    assert "between 1 and 1000" in response.json()["error"]
