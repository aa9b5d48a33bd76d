"""JSON serialization utilities for MongoDB ObjectId handling"""
import logging
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime, timezone
from dateutil import parser
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

ID_FIELD = "_id"
TIMESTAMP_FIELD = "createdAt"

def serialize_objectid(obj: Any) -> Any:
    """Convert ObjectId and datetime objects to JSON serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
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

def _is_wrapper(value: Any, key: str) -> bool:
    return isinstance(value, dict) and key in value

def parse_extended_date(payload: Any) -> datetime:
    """Parse the payload of a {"$date": ...} wrapper into an aware UTC datetime.

    Accepts an ISO-8601 string, integer milliseconds since epoch, or the
    canonical {"$numberLong": "<ms>"} form.
    """
    if _is_wrapper(payload, "$numberLong"):
        payload = int(payload["$numberLong"])
    if isinstance(payload, bool):
        raise ValueError(f"Unsupported $date payload: {payload!r}")
    if isinstance(payload, (int, float)):
        return datetime.fromtimestamp(payload / 1000, tz=timezone.utc)
    if isinstance(payload, str):
        parsed = parser.isoparse(payload)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    raise ValueError(f"Unsupported $date payload: {payload!r}")

def normalize_record(record: Dict) -> Dict:
    """Convert extended-JSON _id/createdAt wrappers to native BSON types.

    Returns a shallow copy. A value that fails to convert is kept as-is so one
    bad record never aborts the batch.
    """
    out = dict(record)

    if _is_wrapper(out.get(ID_FIELD), "$oid"):
        try:
            out[ID_FIELD] = ObjectId(out[ID_FIELD]["$oid"])
        except (InvalidId, TypeError) as e:
            logger.warning(f"Keeping unconvertible {ID_FIELD} {out[ID_FIELD]!r}: {e}")

    if _is_wrapper(out.get(TIMESTAMP_FIELD), "$date"):
        try:
            out[TIMESTAMP_FIELD] = parse_extended_date(out[TIMESTAMP_FIELD]["$date"])
        except (ValueError, TypeError, OverflowError, OSError) as e:
            logger.warning(f"Keeping unconvertible {TIMESTAMP_FIELD} {out[TIMESTAMP_FIELD]!r}: {e}")

    return out

def normalize_records(records: List[Dict]) -> List[Dict]:
    """Normalize every record of a seed batch"""
    return [normalize_record(record) for record in records]
