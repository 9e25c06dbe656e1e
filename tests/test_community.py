import re
from datetime import datetime

import pytest
from httpx import AsyncClient

from donation_api.routers.comments import display_timestamp
from tests.conftest import API

USER = {"name": "Ada", "email": "ada@example.com", "password": "s3cret-pass"}

@pytest.mark.anyio
async def test_comment_copies_commenter_details(test_client: AsyncClient):
    await test_client.post(f"{API}/register", json=USER)

    r = await test_client.post(f"{API}/comments", json={"email": USER["email"], "comments": "Great cause!"})
    assert r.status_code == 201, r.text
    assert r.json()["message"] == "comments added successfully"

    r = await test_client.get(f"{API}/comments")
    assert r.status_code == 200
    [comment] = r.json()["result"]
    assert comment["email"] == USER["email"]
    assert comment["commenterName"] == "Ada"
    assert comment["commenterImage"] is None
    assert comment["comments"] == "Great cause!"
    assert re.match(r"^\d{1,2}/\d{1,2}/\d{4}, \d{1,2}:\d{2}:\d{2} (AM|PM)$", comment["timestamp"])

@pytest.mark.anyio
async def test_comment_from_unknown_user(test_client: AsyncClient):
    r = await test_client.post(f"{API}/comments", json={"email": "ghost@example.com", "comments": "hi"})
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "User not found"}

def test_display_timestamp():
    assert display_timestamp(datetime(2026, 7, 4, 15, 5, 9)) == "7/4/2026, 3:05:09 PM"
    assert display_timestamp(datetime(2026, 12, 31, 0, 0, 1)) == "12/31/2026, 12:00:01 AM"
    assert display_timestamp(datetime(2026, 1, 2, 12, 30, 0)) == "1/2/2026, 12:30:00 PM"

@pytest.mark.anyio
async def test_testimonials(test_client: AsyncClient):
    r = await test_client.post(f"{API}/testimonial", json={"name": "Sam", "quote": "Helped my family", "rating": 5})
    assert r.status_code == 201
    assert r.json()["message"] == "testimonial added successfully"

    r = await test_client.get(f"{API}/testimonial")
    assert r.status_code == 200
    [item] = r.json()["result"]
    assert item["quote"] == "Helped my family"
    assert item["rating"] == 5

@pytest.mark.anyio
async def test_volunteers(test_client: AsyncClient):
    for name in ("Kim", "Lee"):
        r = await test_client.post(f"{API}/volunteer", json={"name": name, "phone": "555-0100"})
        assert r.status_code == 201

    r = await test_client.get(f"{API}/volunteer")
    assert r.status_code == 200
    assert r.json()["message"] == "volunteer fetched successfully"
    assert [v["name"] for v in r.json()["result"]] == ["Kim", "Lee"]

@pytest.mark.anyio
async def test_client_supplied_id_is_kept(test_client: AsyncClient):
    doc = {"_id": "volunteer-kim", "name": "Kim"}
    r = await test_client.post(f"{API}/volunteer", json=doc)
    assert r.status_code == 201
    assert r.json()["result"]["insertedId"] == "volunteer-kim"

    r = await test_client.get(f"{API}/volunteer")
    assert r.json()["result"] == [doc]

    r = await test_client.post(f"{API}/volunteer", json=doc)
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Database error"}
