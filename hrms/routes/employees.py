"""
HRMS Backend - Employee Route Handlers
=======================================

What:  GET/POST /employee and PUT/DELETE /employee/{id}.
How:   Each handler takes an EmployeeService built around the collection
       from app.state, makes one service call, and wraps the result in the
       `{status, message, data}` envelope. Failures are raised as HRMSError
       subclasses and turned into envelopes by the handlers in main.py.
Who:   Any HTTP client of the HRMS API.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from pymongo.asynchronous.collection import AsyncCollection

from hrms.database import get_employee_collection
from hrms.schemas.employee import APIResponse, EmployeeIn, EmployeeOut
from hrms.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])

_ERROR_RESPONSES = {
    400: {"description": "Malformed identifier or request body", "model": APIResponse},
    500: {"description": "Database failure", "model": APIResponse},
}


def get_employee_service(
    collection: AsyncCollection = Depends(get_employee_collection),
) -> EmployeeService:
    """FastAPI dependency building the service around the request's collection."""
    return EmployeeService(collection)


@router.get(
    "/employee",
    response_model=APIResponse,
    response_model_exclude_none=True,
    responses={500: _ERROR_RESPONSES[500]},
    summary="List all employees",
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> APIResponse:
    employees: List[EmployeeOut] = await service.list_employees()
    return APIResponse(
        status=1,
        message="Employee records retrieved successfully",
        data=employees,
    )


@router.post(
    "/employee",
    response_model=APIResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
    summary="Create an employee",
    description="Stores a new employee. Any identifier in the body is ignored.",
)
async def create_employee(
    employee: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
) -> APIResponse:
    created = await service.create_employee(employee)
    return APIResponse(
        status=1,
        message="Employee record inserted successfully",
        data=created,
    )


@router.put(
    "/employee/{employee_id}",
    response_model=APIResponse,
    response_model_exclude_none=True,
    responses={
        **_ERROR_RESPONSES,
        404: {"description": "No employee with this id", "model": APIResponse},
    },
    summary="Replace an employee's fields",
    description="Overwrites name, salary and age of the employee with the given id.",
)
async def update_employee(
    employee_id: str,
    employee: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
) -> APIResponse:
    updated = await service.update_employee(employee_id, employee)
    return APIResponse(
        status=1,
        message="Employee record updated successfully",
        data=updated,
    )


@router.delete(
    "/employee/{employee_id}",
    response_model=APIResponse,
    response_model_exclude_none=True,
    responses={
        **_ERROR_RESPONSES,
        404: {"description": "No employee with this id", "model": APIResponse},
    },
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> APIResponse:
    await service.delete_employee(employee_id)
    return APIResponse(status=1, message="record deleted")
