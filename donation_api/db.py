# donation_api/db.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from donation_api.core.config import Settings

logger = logging.getLogger(__name__)

# --------------------------------------------------
# Collection names
# --------------------------------------------------
USERS = "users"
DONATIONS = "donations"
DONORS = "donors"
COMMENTS = "comments"
TESTIMONIALS = "testimonials"
VOLUNTEERS = "volunteers"


def connect(settings: Settings) -> AsyncIOMotorClient:
    """Open the one client the process shares. Motor connects lazily."""
    logger.info("Connecting to MongoDB database %r", settings.mongodb_db)
    return AsyncIOMotorClient(settings.mongodb_url)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.mongodb_db]


def close(client: AsyncIOMotorClient) -> None:
    client.close()
    logger.info("MongoDB connection closed")


async def ensure_index(col, keys, name: str, **kwargs):
    existing = [ix["name"] async for ix in col.list_indexes()]
    if name in existing:
        return
    await col.create_index(keys, name=name, **kwargs)


async def ensure_indexes(db: AsyncIOMotorDatabase):
    # email is the identity of users and donors
    await ensure_index(db[USERS], [("email", ASCENDING)], "email_1", unique=True)
    await ensure_index(db[DONORS], [("email", ASCENDING)], "email_1", unique=True)
