"""JSON serialization utilities for MongoDB ObjectId handling"""
from bson import ObjectId
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Union

def format_datetime(value: datetime) -> str:
    """ISO-8601 in UTC with a Z suffix (pymongo hands back naive UTC)"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"

def serialize_objectid(obj: Any) -> Any:
    """Convert ObjectId and datetime objects to JSON serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return format_datetime(obj)
    elif isinstance(obj, date):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {key: serialize_objectid(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [serialize_objectid(item) for item in obj]
    return obj

def sanitize_mongo_document(doc: Union[Dict, List, None]) -> Union[Dict, List, None]:
    """Sanitize MongoDB document for JSON serialization with additional validation"""
    if doc is None:
        return None
    return serialize_objectid(doc)
