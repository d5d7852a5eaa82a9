"""
Employee Service: Employee Route Handlers
============================================

What:  HTTP surface for the employee resource.
How:   Extracts path/body parameters, delegates to EmployeeService, returns
       JSON. Errors propagate as application exceptions to the global
       handlers in main.py.

Route Inventory:
    GET    /employees        list every employee
    POST   /employees        create an employee (201)
    PUT    /employees/{id}   replace name/salary/age
    DELETE /employees/{id}   delete (204)
    GET    /employee/{id}    fetch one (singular path kept for client compatibility)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from pymongo.asynchronous.collection import AsyncCollection

from employee_service.database import get_employees_collection
from employee_service.models.employee import parse_object_id
from employee_service.schemas.employee import Employee, EmployeePayload, ErrorResponse
from employee_service.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


def valid_employee_id(employee_id: str) -> str:
    """
    Path dependency for the write routes.

    FastAPI resolves dependencies before the body model is validated, so a bad
    id is answered with the empty 400 even when the body is also wrong.
    Bytes that are not JSON at all are rejected earlier, while the body is read.
    """
    parse_object_id(employee_id)
    return employee_id


@router.get(
    "/employees",
    response_model=List[Employee],
    response_model_exclude_none=True,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all employees",
)
async def list_employees(
    collection: AsyncCollection = Depends(get_employees_collection),
) -> List[Employee]:
    return await employee_service.list_employees(collection)


@router.post(
    "/employees",
    status_code=201,
    response_model=Employee,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Malformed body", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create an employee",
    description="Any `id` in the body is ignored; the database assigns one.",
)
async def create_employee(
    payload: EmployeePayload,
    collection: AsyncCollection = Depends(get_employees_collection),
) -> Employee:
    return await employee_service.create_employee(collection, payload)


@router.put(
    "/employees/{employee_id}",
    response_model=Employee,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Invalid id, malformed body, or no such employee"},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Update an employee",
    description=(
        "Replaces name, salary and age. Returns the submitted payload with the "
        "path id attached; the stored document is not re-read."
    ),
)
async def update_employee(
    payload: EmployeePayload,
    employee_id: str = Depends(valid_employee_id),
    collection: AsyncCollection = Depends(get_employees_collection),
) -> Employee:
    return await employee_service.update_employee(collection, employee_id, payload)


@router.delete(
    "/employees/{employee_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "Invalid id or no such employee"},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: str = Depends(valid_employee_id),
    collection: AsyncCollection = Depends(get_employees_collection),
) -> Response:
    await employee_service.delete_employee(collection, employee_id)
    return Response(status_code=204)


@router.get(
    "/employee/{employee_id}",
    response_model=Employee,
    response_model_exclude_none=True,
    responses={
        404: {"description": "Invalid id or no such employee", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Get one employee by id",
)
async def get_employee(
    employee_id: str,
    collection: AsyncCollection = Depends(get_employees_collection),
) -> Employee:
    return await employee_service.get_employee(collection, employee_id)
