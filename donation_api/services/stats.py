# donation_api/services/stats.py
from numbers import Number
from typing import Any, Dict, Iterable, List

from bson import json_util

# stage 1: one row per category; stage 2: collapse them into a single summary row
STATISTICS_PIPELINE = [
    {
        "$group": {
            "_id": "$category",
            "totalDonation": {"$sum": "$amount"},
            "totalItem": {"$sum": 1},
        }
    },
    {
        "$group": {
            "_id": None,
            "totalDonationSum": {"$sum": "$totalDonation"},
            "statistics": {"$push": "$$ROOT"},
        }
    },
]


def _numeric(value) -> bool:
    # $sum skips anything that is not a number
    return isinstance(value, Number) and not isinstance(value, bool)


def group_donations(docs: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Evaluate STATISTICS_PIPELINE over plain dicts, for stores that cannot
    run aggregation pipelines. Returns the same rows MongoDB would.
    """
    groups: Dict[Any, Dict[str, Any]] = {}
    for doc in docs:
        category = doc.get("category")
        # lists and sub-documents are valid group keys in MongoDB
        key = json_util.dumps(category)
        group = groups.setdefault(key, {"_id": category, "totalDonation": 0, "totalItem": 0})
        amount = doc.get("amount")
        if _numeric(amount):
            group["totalDonation"] += amount
        group["totalItem"] += 1

    if not groups:
        return []

    statistics = list(groups.values())
    return [{
        "_id": None,
        "totalDonationSum": sum(g["totalDonation"] for g in statistics),
        "statistics": statistics,
    }]


def summarize(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Both fields stay null when there are no donations."""
    row = rows[0] if rows else {}
    return {
        "totalDonationSum": row.get("totalDonationSum"),
        "statistics": row.get("statistics"),
    }
