from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tests.conftest import create_payload, update_payload


def test_get_all_employees_returns_ok(client):
    client.post("/employees", json=create_payload())

    response = client.get("/employees")

    assert response.status_code == 200
    assert [e["FirstName"] for e in response.json()] == ["John"]


def test_create_employee_returns_created_with_location(client):
    response = client.post("/employees", json=create_payload())

    assert response.status_code == 201
    assert response.headers["location"] == "/employees/1"
    data = response.json()
    assert data["FirstName"] == "John"
    assert data["LastName"] == "Doe"
    assert "SocialSecurityNumber" not in data


def test_created_employee_is_readable_without_ssn(client):
    location = client.post("/employees", json=create_payload()).headers["location"]

    response = client.get(location)

    assert response.status_code == 200
    data = response.json()
    assert data["FirstName"] == "John"
    assert data["LastName"] == "Doe"
    assert "SocialSecurityNumber" not in data
    assert "123-46-7890" not in response.text


def test_create_employee_empty_body_returns_bad_request(client):
    response = client.post("/employees", json={})

    assert response.status_code == 400
    assert response.json() == {
        "FirstName": ["First name is required."],
        "LastName": ["Last name is required."],
    }


def test_create_employee_rejects_bad_ssn(client):
    response = client.post("/employees", json=create_payload(SocialSecurityNumber="123456789"))

    assert response.status_code == 400
    assert "SocialSecurityNumber" in response.json()


def test_create_employee_with_wrong_field_type_returns_field_keyed_400(client):
    response = client.post("/employees", json=create_payload(FirstName=["not", "a", "string"]))

    assert response.status_code == 400
    assert "FirstName" in response.json()


def test_create_employee_with_negative_benefit_cost_returns_400(client):
    payload = create_payload(Benefits=[{"BenefitType": "Health", "Cost": -5}])

    response = client.post("/employees", json=payload)

    assert response.status_code == 400
    assert "Benefits.0.Cost" in response.json()


def test_get_employee_by_id_not_found(client):
    response = client.get("/employees/1")
    assert response.status_code == 404


def test_get_employee_non_integer_id_is_not_routed(client):
    response = client.get("/employees/abc")
    assert response.status_code == 404


def test_update_employee_returns_updated_representation(client):
    client.post("/employees", json=create_payload())

    response = client.put("/employees/1", json=update_payload(Email="john@example.com"))

    assert response.status_code == 200
    data = response.json()
    assert data["Address1"] == "1 Main St"
    assert data["ZipCode"] == "62701"
    assert data["Email"] == "john@example.com"
    assert data["FirstName"] == "John"
    assert client.get("/employees/1").json()["City"] == "Springfield"


def test_update_ignores_identity_fields_in_payload(client):
    client.post("/employees", json=create_payload())

    client.put("/employees/1", json=update_payload(FirstName="Bambi", LastName="Deer"))

    data = client.get("/employees/1").json()
    assert (data["FirstName"], data["LastName"]) == ("John", "Doe")


def test_update_employee_not_found(client):
    payload = update_payload(FirstName="Bambi", LastName="Doe", SocialSecurityNumber="123-45-7892")

    response = client.put("/employees/9999", json=payload)

    assert response.status_code == 404


def test_update_employee_missing_address1_returns_bad_request(client):
    client.post("/employees", json=create_payload())

    response = client.put("/employees/1", json={"City": "Springfield"})

    assert response.status_code == 400
    assert response.json() == {"Address1": ["Address1 is required."]}


def test_update_invalid_payload_on_missing_employee_is_bad_request(client):
    response = client.put("/employees/9999", json={})
    assert response.status_code == 400
    assert "Address1" in response.json()


def test_get_benefits_for_employee(client):
    payload = create_payload(
        Benefits=[
            {"BenefitType": "Health", "Cost": 100},
            {"BenefitType": "Dental", "Cost": 50},
        ]
    )
    client.post("/employees", json=payload)

    response = client.get("/employees/1/benefits")

    assert response.status_code == 200
    assert response.json() == [
        {"Id": 1, "EmployeeId": 1, "BenefitType": "Health", "Cost": "100"},
        {"Id": 2, "EmployeeId": 1, "BenefitType": "Dental", "Cost": "50"},
    ]


def test_get_benefits_for_missing_employee(client):
    response = client.get("/employees/5/benefits")
    assert response.status_code == 404


def test_employee_projection_includes_benefits(client):
    client.post("/employees", json=create_payload(Benefits=[{"BenefitType": "Vision", "Cost": "9.99"}]))

    data = client.get("/employees/1").json()

    assert data["Benefits"] == [{"Id": 1, "EmployeeId": 1, "BenefitType": "Vision", "Cost": "9.99"}]


def test_ids_keep_increasing(client):
    locations = [client.post("/employees", json=create_payload()).headers["location"] for _ in range(3)]
    assert locations == ["/employees/1", "/employees/2", "/employees/3"]


def test_unhandled_error_returns_generic_500(app):
    from starlette.testclient import TestClient

    app.state.employee_service.list_employees = MagicMock(side_effect=RuntimeError("boom"))

    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/employees")

    assert response.status_code == 500
    assert response.json() == {"detail": "An unexpected error occurred"}
    assert "boom" not in response.text


@pytest.mark.anyio
async def test_async_create_then_list(async_client):
    response = await async_client.post("/employees", json=create_payload(FirstName="Jane"))
    assert response.status_code == 201

    response = await async_client.get("/employees")
    assert [e["FirstName"] for e in response.json()] == ["Jane"]


def test_benefit_cost_keeps_full_precision(client):
    client.post(
        "/employees",
        json=create_payload(Benefits=[{"BenefitType": "Health", "Cost": "12345678901234567.89"}]),
    )

    response = client.get("/employees/1/benefits")

    assert response.json()[0]["Cost"] == "12345678901234567.89"
