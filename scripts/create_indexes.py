import asyncio

from donation_api import db
from donation_api.core.config import settings

async def main():
    client = db.connect(settings)
    try:
        await db.ensure_indexes(db.get_database(client, settings))
        print("Indexes ensured on", settings.mongodb_db)
    finally:
        db.close(client)

if __name__ == "__main__":
    asyncio.run(main())
