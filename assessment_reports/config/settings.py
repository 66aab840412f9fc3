"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict, List, Set, Tuple
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_bool_env(key: str, default: str) -> bool:
    """Read a truthy flag such as 1/true/yes"""
    return os.getenv(key, default).strip().lower() in {"1", "true", "yes", "on"}

# Database Configuration
class MongoConfig:
    URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "assessment_reports")
    MAX_POOL_SIZE = safe_int_env("MONGO_MAX_POOL_SIZE", "20")
    MIN_POOL_SIZE = safe_int_env("MONGO_MIN_POOL_SIZE", "2")
    SERVER_SELECTION_TIMEOUT_MS = safe_int_env("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
    ENSURE_INDEXES = safe_bool_env("ENSURE_INDEXES", "false")

# Application Configuration
class AppConfig:
    ENV = os.getenv("APP_ENV", "development")
    PORT = safe_int_env("PORT", "3000")
    QUERY_WORKERS = safe_int_env("QUERY_WORKERS", "4")

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENV.strip().lower() == "production"

# Logging Configuration
class LogConfig:
    LEVEL = os.getenv("LOG_LEVEL", "INFO")
    DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
    FILE_NAME = "assessment_reports.log"
    MAX_BYTES = 10 * 1024 * 1024  # 10 MB
    BACKUP_COUNT = 5

# Collections
ASSESSMENTS_COLLECTION = "assessments"
SUBMISSIONS_COLLECTION = "submissions"

# Tenant scoping
TENANT_HEADER = "x-tenant-id"

# Status enums (Business Configuration)
ASSESSMENT_STATUSES: Set[str] = {"draft", "active", "archived"}
SUBMISSION_STATUSES: Set[str] = {"in_progress", "completed", "expired", "cancelled"}
DEFAULT_SUBMISSION_STATUS = "in_progress"

# Pagination (default, max) per resource
ASSESSMENT_PAGE_DEFAULT = 20
ASSESSMENT_PAGE_MAX = 100
SUBMISSION_PAGE_DEFAULT = 50
SUBMISSION_PAGE_MAX = 200  # reporting UIs pull larger batches

# Sorting - every field here must lead a declared compound index after tenantId
ASSESSMENT_SORT_FIELDS: Set[str] = {"createdAt", "name"}
ASSESSMENT_DEFAULT_SORT_FIELD = "createdAt"
SUBMISSION_SORT: List[Tuple[str, int]] = [("submittedAt", -1), ("_id", -1)]

# Score bounds
MIN_SCORE = 0
MAX_SCORE = 100

# Projections - `responses` is never listed
ASSESSMENT_LIST_PROJECTION: Dict[str, int] = {
    "name": 1, "status": 1, "tags": 1, "createdAt": 1, "updatedAt": 1
}
ASSESSMENT_DETAIL_PROJECTION: Dict[str, int] = {
    "name": 1, "description": 1, "status": 1, "tags": 1,
    "metadata": 1, "createdAt": 1, "updatedAt": 1
}
SUBMISSION_LIST_PROJECTION: Dict[str, int] = {
    "assessmentId": 1, "candidateId": 1, "status": 1, "score": 1,
    "submittedAt": 1, "durationSeconds": 1, "createdAt": 1
}
ASSESSMENT_SUBMISSIONS_PROJECTION: Dict[str, int] = {
    "candidateId": 1, "status": 1, "score": 1,
    "submittedAt": 1, "durationSeconds": 1
}

# Index declarations
INDEXES: Dict[str, List[List[Tuple[str, int]]]] = {
    ASSESSMENTS_COLLECTION: [
        [("tenantId", 1)],
        [("status", 1)],
        [("tenantId", 1), ("createdAt", -1)],
        [("tenantId", 1), ("status", 1), ("createdAt", -1)],
        [("tenantId", 1), ("name", 1)],
    ],
    SUBMISSIONS_COLLECTION: [
        [("tenantId", 1)],
        [("candidateId", 1)],
        [("status", 1)],
        [("score", 1)],
        [("submittedAt", 1)],
        [("tenantId", 1), ("assessmentId", 1), ("submittedAt", -1)],
        [("tenantId", 1), ("candidateId", 1), ("submittedAt", -1)],
        [("tenantId", 1), ("status", 1), ("submittedAt", -1)],
        [("tenantId", 1), ("assessmentId", 1), ("score", -1)],
    ],
}
