"""
Employee Service: Employee CRUD Operations
=============================================

What:  The five employee operations: list, create, update, delete, get-one.
Why:   Keeps every database call and its error translation out of the routes.
How:   Each method receives the `employees` collection (injected per request)
       and issues at most one database call, two for create.
Who:   Called by route handlers in routes/employees.py.

Design Decision:
    EmployeeService is stateless; the collection is passed in on every call.
    The only shared object is the driver's client, which is safe for
    concurrent use by many requests.

Error Handling Strategy:
    - Identifiers are parsed BEFORE any database call. Invalid ids never reach
      the driver.
    - PyMongoError from the driver is wrapped in DatabaseError; the driver's
      text goes into the log and the exception context only.
    - Application exceptions propagate unchanged to the global handlers.
"""

import logging
from typing import List

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from employee_service.exceptions import (
    DatabaseError,
    InvalidIdentifierError,
    MissingWriteTargetError,
    NotFoundError,
)
from employee_service.models.employee import (
    from_document,
    parse_object_id,
    to_document,
)
from employee_service.schemas.employee import Employee, EmployeePayload

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    CRUD operations over the `employees` collection.

    Responsibilities:
        - list_employees(): full collection scan
        - create_employee(): insert then re-read the canonical document
        - update_employee(): $set name/salary/age, echo the payload back
        - delete_employee(): delete by id
        - get_employee(): point lookup by id
    """

    async def list_employees(self, collection: AsyncCollection) -> List[Employee]:
        """
        Return every employee in database-native order.

        An empty collection yields an empty list, never an error.
        """
        try:
            documents = await collection.find({}).to_list(None)
        except PyMongoError as e:
            logger.error("Database error listing employees: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve employees. Please try again.",
                context={"error_type": type(e).__name__, "error": str(e)},
            )

        return [Employee(**from_document(doc)) for doc in documents]

    async def create_employee(
        self, collection: AsyncCollection, payload: EmployeePayload
    ) -> Employee:
        """
        Insert a new employee and return it as stored.

        Workflow:
            1. Insert name/salary/age (any client id was dropped by the schema)
            2. Re-fetch by the server-assigned _id to return the canonical form

        Raises:
            DatabaseError: insert failed, or the new document could not be read back
        """
        try:
            result = await collection.insert_one(to_document(payload.model_dump()))
            # Re-read so the response carries exactly what was stored
            document = await collection.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            logger.error("Database error creating employee: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the employee. Please try again.",
                context={"error_type": type(e).__name__, "error": str(e)},
            )

        if document is None:
            raise DatabaseError(
                message="Could not create the employee. Please try again.",
                context={"inserted_id": str(result.inserted_id)},
            )

        logger.info("Employee created: %s", result.inserted_id)
        return Employee(**from_document(document))

    async def update_employee(
        self,
        collection: AsyncCollection,
        employee_id: str,
        payload: EmployeePayload,
    ) -> Employee:
        """
        Replace name, salary and age of an existing employee.

        The response is the caller's payload with the path id attached; the
        stored document is not read back after the write.

        Raises:
            InvalidIdentifierError: employee_id is not a valid ObjectId (no DB call)
            MissingWriteTargetError: no document has this id (nothing is created)
            DatabaseError: driver failure
        """
        # Parse first: an unparseable id never reaches the driver
        object_id = parse_object_id(employee_id)

        # No upsert: a missing _id leaves the collection untouched
        try:
            previous = await collection.find_one_and_update(
                {"_id": object_id},
                {"$set": to_document(payload.model_dump())},
            )
        except PyMongoError as e:
            logger.error("Database error updating employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                message="Could not update the employee. Please try again.",
                context={"employee_id": employee_id, "error": str(e)},
            )

        if previous is None:
            raise MissingWriteTargetError(resource_id=employee_id)

        logger.info("Employee updated: %s", employee_id)
        # Echo the submitted values; the stored document is not re-read
        return Employee(id=employee_id, **payload.model_dump())

    async def delete_employee(self, collection: AsyncCollection, employee_id: str) -> None:
        """
        Delete an employee by id.

        Raises:
            InvalidIdentifierError: employee_id is not a valid ObjectId (no DB call)
            MissingWriteTargetError: no document was removed
            DatabaseError: driver failure
        """
        object_id = parse_object_id(employee_id)

        try:
            result = await collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error("Database error deleting employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                message="Could not delete the employee. Please try again.",
                context={"employee_id": employee_id, "error": str(e)},
            )

        # deleted_count is 0 both for a never-assigned id and a second delete
        if result.deleted_count < 1:
            raise MissingWriteTargetError(resource_id=employee_id)

        logger.info("Employee deleted: %s", employee_id)

    async def get_employee(self, collection: AsyncCollection, employee_id: str) -> Employee:
        """
        Fetch one employee by id.

        An unparseable id is reported exactly like a missing document.

        Raises:
            NotFoundError: invalid id, or no document with this id (→ 404)
            DatabaseError: driver failure
        """
        try:
            object_id = parse_object_id(employee_id)
        except InvalidIdentifierError:
            # Reads report a malformed id the same way as an unknown one
            raise NotFoundError(resource_id=employee_id)

        try:
            document = await collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error("Database error fetching employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the employee. Please try again.",
                context={"employee_id": employee_id, "error": str(e)},
            )

        if document is None:
            raise NotFoundError(resource_id=employee_id)

        return Employee(**from_document(document))


# ── Singleton Instance ────────────────────────────────────────────────────
employee_service = EmployeeService()
