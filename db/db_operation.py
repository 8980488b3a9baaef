from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("DB_OPERATION")

async def create_indexes():
    if not settings.remote_enabled:
        logger.info("Content backend is 'json', skipping index creation")
        return
    await mongo_conn.pages_collection.create_index("id", unique=True)
    await mongo_conn.pages_collection.create_index("slug", unique=True)
    await mongo_conn.gallery_collection.create_index("id", unique=True)
    await mongo_conn.gallery_collection.create_index("tags")
    await mongo_conn.translations_collection.create_index(
        [("locale", ASCENDING), ("key", ASCENDING)], unique=True
    )
    logger.info("Indexes created")

class MongoConnection:
    """
    Holds the motor client for the remote content backend.
    The client is built on first use so JSON-only deployments never need MONGO_URI.
    """
    def __init__(self):
        self._client = None

    @property
    def client(self):
        if self._client is None:
            logger.info("Initializing MongoDB Connection")
            self._client = AsyncIOMotorClient(settings.MONGO_URI)
        return self._client

    @property
    def db(self):
        return self.client[settings.DB_NAME]

    @property
    def pages_collection(self):
        return self.db["pages"]

    @property
    def settings_collection(self):
        return self.db["settings"]

    @property
    def gallery_collection(self):
        return self.db["gallery_images"]

    @property
    def translations_collection(self):
        return self.db["translations"]

# Create the instance
mongo_conn = MongoConnection()
