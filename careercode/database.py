import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from careercode.config import Settings
from careercode.utils.errors import StoreUnavailable

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Build the process-wide Motor client with the Stable API pinned to v1."""
    options = {
        "server_api": ServerApi("1", strict=True, deprecation_errors=True),
    }
    if settings.mongo_timeout_ms:
        options["serverSelectionTimeoutMS"] = settings.mongo_timeout_ms
        options["timeoutMS"] = settings.mongo_timeout_ms
    return AsyncIOMotorClient(settings.mongo_uri, **options)


async def connect_to_mongo(settings: Settings) -> AsyncIOMotorClient:
    """Connect and ping the deployment; raises StoreUnavailable if it can't be reached."""
    if not settings.mongo_uri:
        raise StoreUnavailable("MONGO_URI is not set and DB_USER/DB_PASS are missing")

    client = create_client(settings)
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.error(f"Could not connect to MongoDB: {e}")
        raise StoreUnavailable() from e

    logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    return client


async def close_mongo_connection(client: AsyncIOMotorClient) -> None:
    if client:
        client.close()
        logger.info("MongoDB connection closed")


def get_db(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db
