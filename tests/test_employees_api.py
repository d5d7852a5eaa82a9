"""
Employee Service: Employee Endpoint Tests
============================================

What:  End-to-end tests of the HTTP surface against an in-memory collection.
How:   httpx AsyncClient over ASGITransport; the `employees` collection is a
       mongomock-motor collection injected through a dependency override.
"""

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from employee_service.database import get_employees_collection
from employee_service.main import app


class TestRootAndHealth:

    @pytest.mark.asyncio
    async def test_greeting(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "employee service"

    @pytest.mark.asyncio
    async def test_health_without_database_handle(self, test_client):
        """No lifespan ran, so the handle is missing and health says so."""
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_request_id_header_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestListAndCreate:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/employees")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_then_list(self, test_client, sample_employee_data):
        created = await test_client.post("/employees", json=sample_employee_data)

        assert created.status_code == 201
        body = created.json()
        assert body["id"]
        assert ObjectId.is_valid(body["id"])

        listed = await test_client.get("/employees")
        assert listed.status_code == 200
        assert listed.json() == [{"id": body["id"], **sample_employee_data}]

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, test_client):
        client_id = "0123456789abcdef01234567"
        response = await test_client.post(
            "/employees", json={"id": client_id, "name": "Ann", "salary": 1, "age": 2}
        )

        assert response.status_code == 201
        assert response.json()["id"] != client_id

    @pytest.mark.asyncio
    async def test_create_malformed_json(self, test_client):
        response = await test_client.post(
            "/employees",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_create_wrong_field_type(self, test_client):
        response = await test_client.post(
            "/employees", json={"name": "Ann", "salary": "lots", "age": 30}
        )

        assert response.status_code == 400
        assert "salary" in response.json()["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        b'{"name": "Ann", "salary": 1e999, "age": 30}',
        b'{"name": "Ann", "salary": NaN, "age": 30}',
        b'{"name": "Ann", "salary": 1, "age": Infinity}',
        b'{"name": "Ann", "salary": 1, "age": -Infinity}',
    ])
    async def test_create_non_finite_number(self, test_client, employees_collection, body):
        response = await test_client.post(
            "/employees", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert await employees_collection.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, test_client):
        payload = {"name": "Zoë Ω", "salary": 1234.56, "age": 27.5}
        created = (await test_client.post("/employees", json=payload)).json()

        response = await test_client.get(f"/employee/{created['id']}")

        assert response.status_code == 200
        fetched = response.json()
        assert {k: fetched[k] for k in ("name", "salary", "age")} == payload


class TestGetOne:

    @pytest.mark.asyncio
    async def test_get_never_assigned_id(self, test_client):
        response = await test_client.get(f"/employee/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["message"] == "not found"

    @pytest.mark.asyncio
    async def test_get_invalid_id(self, test_client):
        response = await test_client.get("/employee/not-an-object-id")

        assert response.status_code == 404
        assert response.json()["message"] == "not found"


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_invalid_id(self, test_client, employees_collection, sample_employee_data):
        await test_client.post("/employees", json=sample_employee_data)

        response = await test_client.put("/employees/bad-id", json={"name": "X"})

        assert response.status_code == 400
        assert response.content == b""
        assert await employees_collection.count_documents({"name": "X"}) == 0

    @pytest.mark.asyncio
    async def test_update_nonexistent_id_does_not_upsert(self, test_client, employees_collection):
        response = await test_client.put(
            f"/employees/{ObjectId()}", json={"name": "Ghost", "salary": 1, "age": 1}
        )

        assert response.status_code == 400
        assert await employees_collection.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_update_existing(self, test_client, sample_employee_data):
        created = (await test_client.post("/employees", json=sample_employee_data)).json()
        update = {"id": "ignored", "name": "Ann B", "salary": 2000, "age": 31}

        response = await test_client.put(f"/employees/{created['id']}", json=update)

        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"], "name": "Ann B", "salary": 2000.0, "age": 31.0,
        }

        fetched = (await test_client.get(f"/employee/{created['id']}")).json()
        assert fetched["name"] == "Ann B"
        assert fetched["salary"] == 2000.0

    @pytest.mark.asyncio
    async def test_update_invalid_id_checked_before_body(self, test_client):
        """Bad id wins over a body that fails validation."""
        response = await test_client.put(
            "/employees/bad-id", json={"name": "X", "salary": "lots"}
        )

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_update_non_finite_number_leaves_record(self, test_client, sample_employee_data):
        created = (await test_client.post("/employees", json=sample_employee_data)).json()

        response = await test_client.put(
            f"/employees/{created['id']}",
            content=b'{"name": "Ann", "salary": 1e999, "age": 30}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        fetched = (await test_client.get(f"/employee/{created['id']}")).json()
        assert fetched["salary"] == sample_employee_data["salary"]


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client, sample_employee_data):
        created = (await test_client.post("/employees", json=sample_employee_data)).json()

        first = await test_client.delete(f"/employees/{created['id']}")
        assert first.status_code == 204
        assert first.content == b""

        assert (await test_client.get(f"/employee/{created['id']}")).status_code == 404

        second = await test_client.delete(f"/employees/{created['id']}")
        assert second.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, test_client):
        response = await test_client.delete("/employees/123")

        assert response.status_code == 400


class TestDatabaseFailure:
    """Driver errors surface as 500 without leaking the driver's text."""

    @pytest.mark.asyncio
    async def test_list_driver_failure(self, test_client, mock_collection):
        mock_collection.find.return_value.to_list.side_effect = (
            ServerSelectionTimeoutError("boom secret")
        )
        app.dependency_overrides[get_employees_collection] = lambda: mock_collection

        response = await test_client.get("/employees")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"
        assert "boom" not in response.text

    @pytest.mark.asyncio
    async def test_delete_driver_failure(self, test_client, mock_collection):
        mock_collection.delete_one.side_effect = ServerSelectionTimeoutError("boom secret")
        app.dependency_overrides[get_employees_collection] = lambda: mock_collection

        response = await test_client.delete(f"/employees/{ObjectId()}")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"
        assert "boom" not in response.text
