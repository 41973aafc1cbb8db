"""
HRMS Backend - Employee Document Mapping
=========================================

What:  Maps between the API schemas and the documents stored in the
       `employees` collection.

Document shape:
    {
        "_id":    ObjectId,   # assigned by the store on insert, immutable
        "name":   str,
        "salary": float,
        "age":    float,
    }

There is no schema enforcement in the store; these helpers are the only
place the field mapping is defined.
"""

from typing import Any, Dict, Mapping

from bson import ObjectId

from hrms.exceptions import ValidationError
from hrms.schemas.employee import EmployeeIn, EmployeeOut

# Non-identifier fields, all overwritten on update
EMPLOYEE_FIELDS = ("name", "salary", "age")


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a path parameter into an ObjectId.

    Raises:
        ValidationError: `value` is not a 24-character hex string.
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValidationError(
            message="Bad Request",
            field="id",
            context={"value": value},
        )
    return ObjectId(value)


def to_document(employee: EmployeeIn) -> Dict[str, Any]:
    """Build the stored document for `employee`, without `_id`."""
    return {field: getattr(employee, field) for field in EMPLOYEE_FIELDS}


def from_document(document: Mapping[str, Any]) -> EmployeeOut:
    """
    Build the API representation of a stored document.

    Missing or null fields read back as their zero values.
    """
    return EmployeeOut(
        id=str(document["_id"]),
        name=_or_zero(document.get("name"), ""),
        salary=_or_zero(document.get("salary"), 0.0),
        age=_or_zero(document.get("age"), 0.0),
    )


def _or_zero(value: Any, zero: Any) -> Any:
    return zero if value is None else value
