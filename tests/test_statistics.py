import pytest
from httpx import AsyncClient

from donation_api.services.stats import STATISTICS_PIPELINE, group_donations, summarize
from tests.conftest import API

SAMPLE = [
    {"category": "food", "amount": 10},
    {"category": "food", "amount": 5},
    {"category": "cash", "amount": 20},
]

@pytest.mark.anyio
async def test_statistics_without_donations(test_client: AsyncClient):
    r = await test_client.get(f"{API}/statistics")
    assert r.status_code == 200
    assert r.json() == {"totalDonationSum": None, "statistics": None}

@pytest.mark.anyio
async def test_statistics_groups_by_category(test_client: AsyncClient):
    for doc in SAMPLE:
        await test_client.post(f"{API}/donations", json=doc)

    r = await test_client.get(f"{API}/statistics")
    assert r.status_code == 200
    body = r.json()
    assert body["totalDonationSum"] == 35
    groups = {g["_id"]: (g["totalDonation"], g["totalItem"]) for g in body["statistics"]}
    assert groups == {"food": (15, 2), "cash": (20, 1)}

def test_non_numeric_amounts_are_counted_not_summed():
    rows = group_donations([
        {"category": "food", "amount": 10},
        {"category": "food", "amount": "lots"},
        {"category": "food", "amount": True},
        {"category": "food"},
    ])
    assert rows[0]["totalDonationSum"] == 10
    assert rows[0]["statistics"] == [{"_id": "food", "totalDonation": 10, "totalItem": 4}]

def test_missing_category_groups_under_none():
    rows = group_donations([{"amount": 3}, {"category": "cash", "amount": 2.5}])
    stats = {g["_id"]: g["totalDonation"] for g in rows[0]["statistics"]}
    assert stats == {None: 3, "cash": 2.5}
    assert rows[0]["totalDonationSum"] == 5.5

def test_summarize_empty():
    assert summarize([]) == {"totalDonationSum": None, "statistics": None}

def test_pipeline_is_two_group_stages():
    first, second = STATISTICS_PIPELINE
    assert first["$group"]["_id"] == "$category"
    assert first["$group"]["totalDonation"] == {"$sum": "$amount"}
    assert second["$group"]["_id"] is None
    assert second["$group"]["statistics"] == {"$push": "$$ROOT"}

@pytest.mark.anyio
async def test_statistics_with_structured_categories(test_client: AsyncClient):
    docs = [
        {"category": ["food", "cash"], "amount": 3},
        {"category": ["food", "cash"], "amount": 4},
        {"category": {"kind": "clothes"}, "amount": 1},
    ]
    for doc in docs:
        await test_client.post(f"{API}/donations", json=doc)

    r = await test_client.get(f"{API}/statistics")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["totalDonationSum"] == 8
    assert body["statistics"] == [
        {"_id": ["food", "cash"], "totalDonation": 7, "totalItem": 2},
        {"_id": {"kind": "clothes"}, "totalDonation": 1, "totalItem": 1},
    ]

    # later requests keep working
    r = await test_client.get(f"{API}/statistics")
    assert r.status_code == 200

def test_list_and_document_categories_group_by_value():
    rows = group_donations([
        {"category": ["a", "b"], "amount": 1},
        {"category": ["b", "a"], "amount": 2},
        {"category": ["a", "b"], "amount": 3},
    ])
    stats = [(g["_id"], g["totalDonation"]) for g in rows[0]["statistics"]]
    assert stats == [(["a", "b"], 4), (["b", "a"], 2)]
