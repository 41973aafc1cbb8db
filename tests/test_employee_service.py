"""
HRMS Backend - Employee Service Unit Tests
===========================================

What:  Tests for EmployeeService's translation to collection calls.
How:   Uses an AsyncMock collection (no real database).

What we test:
    ✅ Each operation issues the expected collection call
    ✅ Misses become NotFoundError
    ✅ Malformed ids raise ValidationError before the collection is touched
    ✅ Driver errors are wrapped in DatabaseError carrying the driver's text
"""

from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure

from hrms.exceptions import DatabaseError, NotFoundError, ValidationError
from hrms.schemas.employee import EmployeeIn
from hrms.services.employee_service import EmployeeService


@pytest.fixture
def employee_in():
    return EmployeeIn(name="Linus", salary=5000.0, age=28)


class TestListEmployees:
    """Tests for list_employees."""

    @pytest.mark.asyncio
    async def test_maps_documents(self, mock_collection):
        """Stored documents should be mapped to EmployeeOut with hex ids."""
        oid = ObjectId()
        mock_collection.find.return_value.to_list.return_value = [
            {"_id": oid, "name": "Linus", "salary": 5000.0, "age": 28.0},
        ]

        result = await EmployeeService(mock_collection).list_employees()

        mock_collection.find.assert_called_once_with({})
        assert len(result) == 1
        assert result[0].id == str(oid)
        assert result[0].name == "Linus"

    @pytest.mark.asyncio
    async def test_driver_error_wrapped(self, mock_collection):
        """Driver errors while listing should surface as DatabaseError."""
        mock_collection.find.return_value.to_list.side_effect = OperationFailure("not authorized")

        with pytest.raises(DatabaseError) as exc_info:
            await EmployeeService(mock_collection).list_employees()

        assert exc_info.value.message == "not authorized"
        assert exc_info.value.context["operation"] == "find"


class TestCreateEmployee:
    """Tests for create_employee."""

    @pytest.mark.asyncio
    async def test_inserts_and_reads_back(self, mock_collection, employee_in):
        """Create should insert the fields and return the read-back document."""
        oid = ObjectId()
        mock_collection.insert_one.return_value = SimpleNamespace(inserted_id=oid)
        mock_collection.find_one.return_value = {
            "_id": oid, "name": "Linus", "salary": 5000.0, "age": 28.0,
        }

        result = await EmployeeService(mock_collection).create_employee(employee_in)

        mock_collection.insert_one.assert_awaited_once_with(
            {"name": "Linus", "salary": 5000.0, "age": 28.0}
        )
        mock_collection.find_one.assert_awaited_once_with({"_id": oid})
        assert result.id == str(oid)
        assert result.salary == 5000.0

    @pytest.mark.asyncio
    async def test_missing_read_back_raises(self, mock_collection, employee_in):
        """A vanished inserted document should raise DatabaseError."""
        mock_collection.insert_one.return_value = SimpleNamespace(inserted_id=ObjectId())
        mock_collection.find_one.return_value = None

        with pytest.raises(DatabaseError):
            await EmployeeService(mock_collection).create_employee(employee_in)

    @pytest.mark.asyncio
    async def test_insert_failure_wrapped(self, mock_collection, employee_in):
        """Insert failure should be wrapped and skip the read-back."""
        mock_collection.insert_one.side_effect = OperationFailure("disk full")

        with pytest.raises(DatabaseError, match="disk full"):
            await EmployeeService(mock_collection).create_employee(employee_in)

        mock_collection.find_one.assert_not_awaited()


class TestUpdateEmployee:
    """Tests for update_employee."""

    @pytest.mark.asyncio
    async def test_sets_all_fields(self, mock_collection, employee_in):
        """Update should $set every field and ask for the updated document."""
        oid = ObjectId()
        mock_collection.find_one_and_update.return_value = {
            "_id": oid, "name": "Linus", "salary": 5000.0, "age": 28.0,
        }

        result = await EmployeeService(mock_collection).update_employee(str(oid), employee_in)

        mock_collection.find_one_and_update.assert_awaited_once_with(
            {"_id": oid},
            {"$set": {"name": "Linus", "salary": 5000.0, "age": 28.0}},
            return_document=ReturnDocument.AFTER,
        )
        assert result.id == str(oid)

    @pytest.mark.asyncio
    async def test_malformed_id_skips_store(self, mock_collection, employee_in):
        """Malformed id should raise before the collection is touched."""
        with pytest.raises(ValidationError):
            await EmployeeService(mock_collection).update_employee("xyz", employee_in)

        mock_collection.find_one_and_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, mock_collection, employee_in):
        """No matching document should raise NotFoundError carrying the id."""
        mock_collection.find_one_and_update.return_value = None
        oid = str(ObjectId())

        with pytest.raises(NotFoundError) as exc_info:
            await EmployeeService(mock_collection).update_employee(oid, employee_in)

        assert exc_info.value.resource_id == oid


class TestDeleteEmployee:
    """Tests for delete_employee."""

    @pytest.mark.asyncio
    async def test_deletes_by_object_id(self, mock_collection):
        """Delete should target the parsed ObjectId."""
        oid = ObjectId()
        mock_collection.delete_one.return_value = SimpleNamespace(deleted_count=1)

        await EmployeeService(mock_collection).delete_employee(str(oid))

        mock_collection.delete_one.assert_awaited_once_with({"_id": oid})

    @pytest.mark.asyncio
    async def test_nothing_deleted_raises_not_found(self, mock_collection):
        """A delete that removes nothing should raise NotFoundError."""
        mock_collection.delete_one.return_value = SimpleNamespace(deleted_count=0)

        with pytest.raises(NotFoundError):
            await EmployeeService(mock_collection).delete_employee(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_malformed_id_skips_store(self, mock_collection):
        """A 23-character id should be rejected without a delete call."""
        with pytest.raises(ValidationError):
            await EmployeeService(mock_collection).delete_employee("0" * 23)

        mock_collection.delete_one.assert_not_awaited()
