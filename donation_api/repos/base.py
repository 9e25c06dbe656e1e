# donation_api/repos/base.py
"""
Helpers shared by the Mongo and in-memory repositories.

Both repositories expose the same coroutine methods and hand back plain dicts
shaped like the driver's write results, so routes never care which one is
wired in:

  users        find_user_by_email, create_user
  donations    insert_donation, list_donations, get_donation,
               update_donation, delete_donation, donation_statistics
  donors       record_donor, list_donors
  comments     insert_comment, list_comments
  testimonials insert_testimonial, list_testimonials
  volunteers   insert_volunteer, list_volunteers
"""
from typing import Any, Dict, Optional

from bson import ObjectId


def parse_object_id(value: str) -> ObjectId:
    # raises bson.errors.InvalidId on malformed input
    return ObjectId(value)


def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    out = dict(doc)
    if "_id" in out:
        out["_id"] = str(out["_id"])
    return out


def insert_result(inserted_id) -> Dict[str, Any]:
    return {"acknowledged": True, "insertedId": str(inserted_id)}


def update_result(matched: int, modified: int, upserted_id=None) -> Dict[str, Any]:
    return {
        "acknowledged": True,
        "matchedCount": matched,
        "modifiedCount": modified,
        "upsertedId": str(upserted_id) if upserted_id is not None else None,
        "upsertedCount": 1 if upserted_id is not None else 0,
    }


def update_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Only the keys the client actually sent; the document id is not patchable."""
    return {k: v for k, v in fields.items() if k != "_id"}
