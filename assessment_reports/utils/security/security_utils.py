"""Security utilities - DRY principle"""
import re
from typing import Any
from bson import ObjectId
from bson.errors import InvalidId
from assessment_reports.exceptions.exceptions import InvalidInputError

def sanitize_string_input(value: Any, field_name: str = "Input") -> str:
    """Sanitize string input to prevent injection"""
    if not isinstance(value, str):
        raise InvalidInputError(f"{field_name} must be a string")
    return value.strip()

def is_valid_object_id(value: Any) -> bool:
    """True for 24-hex strings and ObjectId instances"""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value) and len(value) == 24

def parse_object_id(value: Any, field_name: str = "id") -> ObjectId:
    """Validate and return an ObjectId, raising InvalidInputError otherwise"""
    if isinstance(value, dict):
        raise InvalidInputError(f"Invalid {field_name}")  # operator injection attempt
    if not is_valid_object_id(value):
        raise InvalidInputError(f"Invalid {field_name}")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidInputError(f"Invalid {field_name}")

def sanitize_regex_input(pattern: str) -> str:
    """Escape regex metacharacters"""
    return re.escape(str(pattern).strip())
