"""
Employee Service: Employee Document Mapping
==============================================

What:  Shape of an employee as stored in the `employees` collection, plus the
       conversions between stored documents and identifiers at the API edge.
Why:   The API speaks 24-char hex strings; MongoDB stores bson.ObjectId under
       `_id`. Keeping the translation here means services never touch raw
       `_id` handling directly.
Who:   Used by EmployeeService for every read and write.

Document Design:
    {
        "_id":    ObjectId,   # assigned by the server on insert, immutable
        "name":   str,
        "salary": float,
        "age":    float,
    }
    No indexes beyond the implicit one on `_id`; every lookup is by `_id`
    or a full collection scan.
"""

from typing import Any, Dict, Mapping

from bson import ObjectId
from bson.errors import InvalidId

from employee_service.exceptions import InvalidIdentifierError

# Fields written on insert and replaced on update; `_id` is never written by us
MUTABLE_FIELDS = ("name", "salary", "age")


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a hex identifier from the URL into an ObjectId.

    Raises:
        InvalidIdentifierError: value is not a 24-character hex string.
    """
    # ObjectId() also accepts 12-byte binary strings; the wire format is hex only
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidIdentifierError(str(value))
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(value)


def to_document(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Build the storable document for the mutable fields (no `_id`)."""
    return {
        "name": str(fields.get("name", "")),
        "salary": float(fields.get("salary", 0.0)),
        "age": float(fields.get("age", 0.0)),
    }


def from_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten a stored document into API field names (`_id` → `id` as hex)."""
    return {
        "id": str(document["_id"]),
        "name": document.get("name", ""),
        "salary": document.get("salary", 0.0),
        "age": document.get("age", 0.0),
    }
