from typing import Any, Dict, Optional

from bson import ObjectId

from careercode.utils.errors import InvalidIdentifier


def to_object_id(value: Any, label: str = "ID") -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifier(f"Invalid {label}")
    return ObjectId(value)


def serialize(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Make a stored document JSON friendly (ObjectId values become hex strings)."""
    if document is None:
        return None
    return {key: str(value) if isinstance(value, ObjectId) else value for key, value in document.items()}
