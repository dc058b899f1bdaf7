# gateway/database/connection.py

import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError
from pymongo.server_api import ServerApi

from ..config import Settings

logger = logging.getLogger(__name__)


class MongoDB:
    """MongoDB connection owned by the application.

    Created once during startup and attached to ``app.state``; handlers reach
    it only through the dependencies in ``gateway.dependencies``.
    """

    def __init__(self, settings: Settings):
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

        self.mongodb_uri = settings.mongodb_uri
        self.database_name = settings.db_name
        self.server_api = settings.mongodb_server_api
        self.timeout_ms = settings.mongodb_timeout_ms

    @property
    def is_connected(self) -> bool:
        return self.database is not None

    async def connect(self) -> None:
        """Connect to MongoDB and select the configured database"""
        try:
            logger.info(f"Connecting to MongoDB database {self.database_name}...")

            options = {"serverSelectionTimeoutMS": self.timeout_ms}
            if self.server_api:
                options["server_api"] = ServerApi(self.server_api)
            self.client = AsyncIOMotorClient(self.mongodb_uri, **options)

            # Test connection
            await self.client.admin.command("ping")

            self.database = self.client[self.database_name]
            logger.info(f"Connected to MongoDB database: {self.database_name}")

        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            await self.disconnect()
            raise RuntimeError(f"MongoDB connection failed: {e}") from e
        except PyMongoError as e:
            logger.error(f"MongoDB connection error: {e}")
            await self.disconnect()
            raise

    async def disconnect(self) -> None:
        """Disconnect from MongoDB"""
        if self.client is not None:
            logger.info("Disconnecting from MongoDB...")
            self.client.close()
            self.client = None
            self.database = None
            logger.info("MongoDB connection closed")

    async def health_check(self) -> bool:
        """Check MongoDB connection health"""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
