"""
Conversion of raw MongoDB documents into plain record dictionaries.

Stored documents use the string form of the integer identifier as ``_id``
and BSON dates for timestamps. ``normalize`` turns the key back into an
``id`` field and makes every well-known timestamp a timezone-aware UTC
``datetime``.
"""
import math
import re
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional, Union

from bson import Timestamp
from pydantic import BaseModel

# Fields stored as BSON dates
TIMESTAMP_FIELDS = ("created_at", "entry_date", "exit_date")

# Plain decimal numbers only; no digit separators or special literals
_NUMERIC_KEY = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def coerce_key(key: Any) -> Union[int, float, str]:
    """
    Convert a document key to a number when it represents one.

    "42" -> 42, "2.5" -> 2.5, "abc" -> "abc". Non-finite values, digit
    separators such as "1_000" and the empty string are kept as strings.
    """
    if not isinstance(key, str):
        return key
    text = key.strip()
    if not _NUMERIC_KEY.fullmatch(text):
        return key
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return key
    return value if math.isfinite(value) else key


def to_datetime(value: Any) -> datetime:
    """Convert a stored timestamp into an aware UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            # BSON dates are returned naive, in UTC
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, Timestamp):
        return value.as_datetime()
    if isinstance(value, str):
        return to_datetime(datetime.fromisoformat(value.replace("Z", "+00:00")))
    raise TypeError(f"Unsupported timestamp value: {value!r}")


def normalize(raw_doc: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Turn a raw document into a record dictionary.

    Args:
        raw_doc: Document as returned by motor, or None

    Returns:
        Record dictionary, or None when the document does not exist
    """
    if raw_doc is None:
        return None

    record = {k: v for k, v in raw_doc.items() if k != "_id"}
    # The key always wins over an id stored in the payload
    record["id"] = coerce_key(raw_doc.get("_id"))

    for field in TIMESTAMP_FIELDS:
        if record.get(field) is not None:
            record[field] = to_datetime(record[field])

    return record


def normalize_all(raw_docs: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Normalize a result set. An empty result gives an empty list."""
    return [normalize(doc) for doc in raw_docs]


def partial_fields(update: BaseModel) -> dict[str, Any]:
    """Fields the caller actually supplied on a partial update model."""
    return update.model_dump(exclude_unset=True, mode="python")


def merge_fields(base: Mapping[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """Field-level merge: keys in ``update`` replace those in ``base``."""
    merged = dict(base)
    merged.update(update)
    return merged
