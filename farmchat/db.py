# farmchat/db.py
import logging
from typing import Optional
from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient
from farmchat.config import settings

logger = logging.getLogger(__name__)

class DB:
    client: Optional[AsyncIOMotorClient] = None
    database = None
    farmers = None

db = DB()

async def ensure_indexes():
    # one profile per email; lookups go through this index
    await db.farmers.create_index("email", unique=True, name="uniq_email")

def setup_mongo(app: FastAPI):
    @app.on_event("startup")
    async def _startup():
        if not settings.mongodb_uri:
            raise RuntimeError("MONGODB_URI is not set. Add it to .env")

        client = AsyncIOMotorClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=8000,
            uuidRepresentation="standard",
        )
        db.client = client

        # If DB name present in URI it's used; otherwise fall back explicitly
        database = client.get_default_database(default=settings.mongodb_db)

        db.database = database
        db.farmers = database[settings.farmers_collection]

        # Ping to ensure connectivity (raises if the server is not reachable)
        await client.admin.command("ping")
        await ensure_indexes()
        logger.info("Connected to MongoDB database %s", database.name)

    @app.on_event("shutdown")
    async def _shutdown():
        if db.client is not None:
            db.client.close()
            db.client = None
            db.database = None
            db.farmers = None
