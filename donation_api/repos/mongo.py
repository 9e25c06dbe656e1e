# donation_api/repos/mongo.py
from typing import Any, Dict, List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
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
from donation_api.services.stats import STATISTICS_PIPELINE


class MongoRepo:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    # helpers
    async def _insert(self, name: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        res = await self.db[name].insert_one(dict(doc))
        return insert_result(res.inserted_id)

    async def _find_all(self, name: str) -> List[Dict[str, Any]]:
        return [serialize(d) async for d in self.db[name].find({})]

    # Users
    async def find_user_by_email(self, email: str) -> Optional[dict]:
        return serialize(await self.db[collections.USERS].find_one({"email": email}))

    async def create_user(self, name: str, email: str, password_hash: str) -> dict:
        try:
            return await self._insert(collections.USERS, {"name": name, "email": email, "password": password_hash})
        except DuplicateKeyError:
            raise ConflictError("User already exists")

    # Donations
    async def insert_donation(self, doc: dict) -> dict:
        return await self._insert(collections.DONATIONS, doc)

    async def list_donations(self) -> List[dict]:
        return await self._find_all(collections.DONATIONS)

    async def get_donation(self, donation_id: str) -> Optional[dict]:
        _id = parse_object_id(donation_id)
        return serialize(await self.db[collections.DONATIONS].find_one({"_id": _id}))

    async def update_donation(self, donation_id: str, fields: dict) -> Optional[dict]:
        _id = parse_object_id(donation_id)
        to_set = update_fields(fields)
        c = self.db[collections.DONATIONS]
        if not to_set:
            return serialize(await c.find_one({"_id": _id}))
        doc = await c.find_one_and_update(
            {"_id": _id},
            {"$set": to_set},
            return_document=ReturnDocument.AFTER,
        )
        return serialize(doc)

    async def delete_donation(self, donation_id: str) -> Optional[dict]:
        _id = parse_object_id(donation_id)
        return serialize(await self.db[collections.DONATIONS].find_one_and_delete({"_id": _id}))

    async def donation_statistics(self) -> List[dict]:
        cursor = self.db[collections.DONATIONS].aggregate(STATISTICS_PIPELINE)
        return [row async for row in cursor]

    # Donors
    async def record_donor(self, email: str, name: str, image: Optional[str], amount) -> Tuple[bool, dict]:
        """
        Add `amount` to the donor's running total, creating the donor on first
        sight. Returns (created, write result).
        """
        res = await self.db[collections.DONORS].update_one(
            {"email": email},
            {"$inc": {"amount": amount}, "$setOnInsert": {"name": name, "image": image}},
            upsert=True,
        )
        if res.upserted_id is not None:
            return True, insert_result(res.upserted_id)
        return False, update_result(res.matched_count, res.modified_count)

    async def list_donors(self) -> List[dict]:
        return await self._find_all(collections.DONORS)

    # Comments / testimonials / volunteers
    async def insert_comment(self, doc: dict) -> dict:
        return await self._insert(collections.COMMENTS, doc)

    async def list_comments(self) -> List[dict]:
        return await self._find_all(collections.COMMENTS)

    async def insert_testimonial(self, doc: dict) -> dict:
        return await self._insert(collections.TESTIMONIALS, doc)

    async def list_testimonials(self) -> List[dict]:
        return await self._find_all(collections.TESTIMONIALS)

    async def insert_volunteer(self, doc: dict) -> dict:
        return await self._insert(collections.VOLUNTEERS, doc)

    async def list_volunteers(self) -> List[dict]:
        return await self._find_all(collections.VOLUNTEERS)
