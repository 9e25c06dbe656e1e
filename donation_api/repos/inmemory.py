# donation_api/repos/inmemory.py
import copy
from typing import Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from donation_api import db as collections
from donation_api.core.errors import ConflictError
from donation_api.repos.base import (
    insert_result,
    parse_object_id,
    serialize,
    update_fields,
    update_result,
)
from donation_api.services.stats import group_donations


class InMemoryRepo:
    """Dict-backed stand-in for MongoRepo, used in tests and with USE_MONGO=0."""

    def __init__(self):
        self.collections: Dict[str, List[dict]] = {
            name: [] for name in (
                collections.USERS,
                collections.DONATIONS,
                collections.DONORS,
                collections.COMMENTS,
                collections.TESTIMONIALS,
                collections.VOLUNTEERS,
            )
        }

    def _insert(self, name: str, doc: dict) -> dict:
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", ObjectId())
        if self._find_one(name, _id=stored["_id"]):
            raise DuplicateKeyError(f"E11000 duplicate key error collection: {name} index: _id_")
        self.collections[name].append(stored)
        return insert_result(stored["_id"])

    def _find_all(self, name: str) -> List[dict]:
        return [serialize(copy.deepcopy(d)) for d in self.collections[name]]

    def _find_one(self, name: str, **query) -> Optional[dict]:
        for doc in self.collections[name]:
            if all(doc.get(k) == v for k, v in query.items()):
                return doc
        return None

    # Users
    async def find_user_by_email(self, email: str) -> Optional[dict]:
        return serialize(copy.deepcopy(self._find_one(collections.USERS, email=email)))

    async def create_user(self, name: str, email: str, password_hash: str) -> dict:
        if self._find_one(collections.USERS, email=email):
            raise ConflictError("User already exists")
        return self._insert(collections.USERS, {"name": name, "email": email, "password": password_hash})

    # Donations
    async def insert_donation(self, doc: dict) -> dict:
        return self._insert(collections.DONATIONS, doc)

    async def list_donations(self) -> List[dict]:
        return self._find_all(collections.DONATIONS)

    async def get_donation(self, donation_id: str) -> Optional[dict]:
        _id = parse_object_id(donation_id)
        return serialize(copy.deepcopy(self._find_one(collections.DONATIONS, _id=_id)))

    async def update_donation(self, donation_id: str, fields: dict) -> Optional[dict]:
        _id = parse_object_id(donation_id)
        doc = self._find_one(collections.DONATIONS, _id=_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(update_fields(fields)))
        return serialize(copy.deepcopy(doc))

    async def delete_donation(self, donation_id: str) -> Optional[dict]:
        _id = parse_object_id(donation_id)
        doc = self._find_one(collections.DONATIONS, _id=_id)
        if doc is None:
            return None
        self.collections[collections.DONATIONS].remove(doc)
        return serialize(doc)

    async def donation_statistics(self) -> List[dict]:
        return group_donations(self.collections[collections.DONATIONS])

    # Donors
    async def record_donor(self, email: str, name: str, image: Optional[str], amount) -> Tuple[bool, dict]:
        doc = self._find_one(collections.DONORS, email=email)
        if doc is None:
            return True, self._insert(
                collections.DONORS, {"email": email, "name": name, "image": image, "amount": amount}
            )
        doc["amount"] = doc.get("amount", 0) + amount
        return False, update_result(1, 1)

    async def list_donors(self) -> List[dict]:
        return self._find_all(collections.DONORS)

    # Comments / testimonials / volunteers
    async def insert_comment(self, doc: dict) -> dict:
        return self._insert(collections.COMMENTS, doc)

    async def list_comments(self) -> List[dict]:
        return self._find_all(collections.COMMENTS)

    async def insert_testimonial(self, doc: dict) -> dict:
        return self._insert(collections.TESTIMONIALS, doc)

    async def list_testimonials(self) -> List[dict]:
        return self._find_all(collections.TESTIMONIALS)

    async def insert_volunteer(self, doc: dict) -> dict:
        return self._insert(collections.VOLUNTEERS, doc)

    async def list_volunteers(self) -> List[dict]:
        return self._find_all(collections.VOLUNTEERS)
