"""
HRMS Backend - Employee Service
================================

What:  Translates each employee operation into a single collection call.
How:   The service is constructed with the `employees` collection and keeps
       no other state. Driver failures are wrapped in DatabaseError; misses
       become NotFoundError; malformed identifiers become ValidationError
       before the collection is touched.
Who:   Built per request by the employee routes (see get_employee_service).

Operation → collection call:
    list_employees   → find({})
    create_employee  → insert_one(doc), then find_one({_id})
    update_employee  → find_one_and_update({_id}, {$set: ...})
    delete_employee  → delete_one({_id})
"""

import logging
from typing import List

from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from hrms.exceptions import DatabaseError, NotFoundError
from hrms.models.employee import (
    EMPLOYEE_FIELDS,
    from_document,
    parse_object_id,
    to_document,
)
from hrms.schemas.employee import EmployeeIn, EmployeeOut

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    CRUD over the employees collection.

    Error Handling Strategy:
        Only `PyMongoError` is wrapped; our own exceptions propagate as-is.
        The DatabaseError message is the driver's error text.
    """

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def list_employees(self) -> List[EmployeeOut]:
        """
        Return every stored employee.

        No pagination, filtering or ordering is applied; the result is
        whatever order the store yields.
        """
        try:
            cursor = self.collection.find({})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Database error listing employees: %s", str(e))
            raise DatabaseError(
                message=str(e),
                context={"operation": "find", "error_type": type(e).__name__},
            ) from e

        return [from_document(doc) for doc in documents]

    async def create_employee(self, employee: EmployeeIn) -> EmployeeOut:
        """
        Insert a new employee and return the stored record.

        The stored document is read back by its inserted id, so the response
        reflects what the store holds, including the generated identifier.

        Raises:
            DatabaseError: Insert or read-back failed, or the read-back
                           found nothing.
        """
        document = to_document(employee)

        try:
            result = await self.collection.insert_one(document)
            created = await self.collection.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            logger.error("Database error creating employee: %s", str(e))
            raise DatabaseError(
                message=str(e),
                context={"operation": "insert_one", "error_type": type(e).__name__},
            ) from e

        if created is None:
            raise DatabaseError(
                message="Inserted employee record could not be read back",
                context={"operation": "find_one", "inserted_id": str(result.inserted_id)},
            )

        logger.info("Employee created: %s", result.inserted_id)
        return from_document(created)

    async def update_employee(self, employee_id: str, employee: EmployeeIn) -> EmployeeOut:
        """
        Overwrite name, salary and age of an existing employee.

        All three fields are set unconditionally; there is no partial update.

        Raises:
            ValidationError: `employee_id` is not a valid ObjectId (store untouched)
            NotFoundError:   No document has that id
            DatabaseError:   Any other store failure
        """
        object_id = parse_object_id(employee_id)
        changes = {field: getattr(employee, field) for field in EMPLOYEE_FIELDS}

        try:
            updated = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Database error updating employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                message=str(e),
                context={
                    "operation": "find_one_and_update",
                    "employee_id": employee_id,
                    "error_type": type(e).__name__,
                },
            ) from e

        if updated is None:
            raise NotFoundError(resource="employee", resource_id=employee_id)

        logger.info("Employee updated: %s", employee_id)
        return from_document(updated)

    async def delete_employee(self, employee_id: str) -> None:
        """
        Delete one employee by id.

        Raises:
            ValidationError: `employee_id` is not a valid ObjectId (store untouched)
            NotFoundError:   Nothing was deleted
            DatabaseError:   Store failure
        """
        object_id = parse_object_id(employee_id)

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error("Database error deleting employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                message=str(e),
                context={
                    "operation": "delete_one",
                    "employee_id": employee_id,
                    "error_type": type(e).__name__,
                },
            ) from e

        if result.deleted_count < 1:
            raise NotFoundError(resource="employee", resource_id=employee_id)

        logger.info("Employee deleted: %s", employee_id)
