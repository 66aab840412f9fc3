import logging
from pymongo import MongoClient
from pymongo.database import Database
from assessment_reports.config.settings import MongoConfig

logger = logging.getLogger(__name__)

# MongoDB connection configuration
MONGO_CLIENT_CONFIG = {
    'maxPoolSize': MongoConfig.MAX_POOL_SIZE,
    'minPoolSize': MongoConfig.MIN_POOL_SIZE,
    'serverSelectionTimeoutMS': MongoConfig.SERVER_SELECTION_TIMEOUT_MS,
    'retryReads': False,
    'tz_aware': False,
}

def get_mongo_client(uri: str = None) -> MongoClient:
    """Get a MongoDB client with connection pooling."""
    return MongoClient(uri or MongoConfig.URI, **MONGO_CLIENT_CONFIG)

def connect_to_database(uri: str = None, db_name: str = None) -> Database:
    """Create the process-wide client once at startup and return the database handle."""
    client = get_mongo_client(uri)
    db = client[db_name or MongoConfig.DB_NAME]
    logger.info(f"MongoDB client created for database '{db.name}'")
    return db
