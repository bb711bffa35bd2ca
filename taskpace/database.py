"""
TASKPACE API - Database Module

MongoDB connection management using Motor (async driver).
The database is the persistence layer's territory; the calendar and
analysis engines never see it.
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from taskpace.config import settings


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Connect to MongoDB."""
        self.client = AsyncIOMotorClient(settings.MONGODB_URI)
        self.db = self.client[settings.MONGODB_DATABASE]

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None

    async def ensure_indexes(self) -> None:
        """Create the indexes the snapshot and inbox queries rely on."""
        db = self.get_database()
        # Per-owner listings, newest first
        await db["tasks"].create_index([("userId", 1), ("done", 1), ("createdAt", -1)])
        # Owner scan over non-empty inboxes
        await db["notification_inboxes"].create_index("notifications.id", sparse=True)

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db


# Singleton database instance
database = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """Dependency to get the database instance."""
    return database.get_database()
