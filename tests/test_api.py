import csv
from decimal import Decimal
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("HRDESK_SEED_SAMPLE_ROLES", "0")
    monkeypatch.setenv("REPORTS_ROOT", str(tmp_path / "reports"))
    from hrdesk.app import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _money(value) -> Decimal:
    return Decimal(str(value))


def _create_role(client, **overrides) -> dict:
    payload = {
        "title": "Senior Developer",
        "description": "Responsible for developing and maintaining software applications",
        "department": "engineering",
        "level": 3,
        "min_salary": 75000,
        "max_salary": 100000,
        "responsibilities": ["Code development and review", "Mentoring junior developers"],
    }
    payload.update(overrides)
    response = client.post("/api/roles", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def _create_employee(client, role_id: int, **overrides):
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "type": "full-time",
        "department": "engineering",
        "role_id": role_id,
        "salary": 96000,
        "start_date": "2024-01-15",
    }
    payload.update(overrides)
    return client.post("/api/employees", json=payload)


def test_role_crud(client):
    role = _create_role(client, responsibilities=["Code review", "Code review"])
    assert role["responsibilities"] == ["Code review"]

    response = client.get(f"/api/roles/{role['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Senior Developer"

    response = client.put(f"/api/roles/{role['id']}", json={"title": "Staff Developer", "max_salary": 120000})
    assert response.status_code == 200
    assert response.json()["title"] == "Staff Developer"
    assert _money(response.json()["max_salary"]) == Decimal("120000")

    response = client.put(f"/api/roles/{role['id']}", json={"min_salary": 200000})
    assert response.status_code == 400
    assert "min_salary" in response.json()["detail"]

    assert len(client.get("/api/roles").json()) == 1

    response = client.delete(f"/api/roles/{role['id']}")
    assert response.json() == {"message": "Role deleted successfully"}
    assert client.get(f"/api/roles/{role['id']}").status_code == 404
    assert client.delete(f"/api/roles/{role['id']}").status_code == 404


def test_role_rejects_inverted_band(client):
    response = client.post(
        "/api/roles",
        json={"title": "X", "description": "", "department": "ops", "level": 1, "min_salary": 10, "max_salary": 5},
    )
    assert response.status_code == 422


def test_role_responsibility_endpoints(client):
    role = _create_role(client)
    url = f"/api/roles/{role['id']}/responsibilities"

    response = client.post(url, json={"responsibility": "Technical documentation"})
    assert response.json()["responsibilities"][-1] == "Technical documentation"

    response = client.post(url, json={"responsibility": "Technical documentation"})
    assert response.json()["responsibilities"].count("Technical documentation") == 1

    response = client.request("DELETE", url, json={"responsibility": "Mentoring junior developers"})
    assert "Mentoring junior developers" not in response.json()["responsibilities"]

    assert client.post("/api/roles/999/responsibilities", json={"responsibility": "x"}).status_code == 404


def test_employee_creation_enforces_salary_band(client):
    role = _create_role(client)

    response = _create_employee(client, role["id"], salary=120000)
    assert response.status_code == 400
    assert response.json()["detail"] == "Salary must be between 75000 and 100000 for this role"
    assert client.get("/api/employees").json() == []

    for salary, email in ((75000, "low@example.com"), (100000, "high@example.com")):
        response = _create_employee(client, role["id"], salary=salary, email=email)
        assert response.status_code == 201, response.text


def test_employee_creation_rejections(client):
    role = _create_role(client)
    assert _create_employee(client, role["id"]).status_code == 201

    response = _create_employee(client, role["id"])
    assert response.status_code == 400
    assert response.json()["detail"] == "Employee with this email already exists"

    response = _create_employee(client, 999, email="other@example.com")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid role ID"

    response = _create_employee(client, role["id"], email="third@example.com", type="contractor")
    assert response.status_code == 422


def test_employee_read_update_delete(client):
    role = _create_role(client)
    employee = _create_employee(client, role["id"]).json()
    assert employee["status"] == "active"

    response = client.get(f"/api/employees/{employee['id']}")
    assert response.status_code == 200
    assert response.json()["role"]["id"] == role["id"]

    # updates are not checked against the role's band by default
    response = client.put(f"/api/employees/{employee['id']}", json={"salary": 500000, "phone": "555-0100"})
    assert response.status_code == 200
    assert response.json()["phone"] == "555-0100"

    other = _create_employee(client, role["id"], email="grace@example.com").json()
    response = client.put(f"/api/employees/{other['id']}", json={"email": "ada@example.com"})
    assert response.status_code == 400

    assert client.put("/api/employees/999", json={"phone": "1"}).status_code == 404
    assert client.delete(f"/api/employees/{employee['id']}").json() == {"message": "Employee deleted successfully"}
    assert client.get(f"/api/employees/{employee['id']}").status_code == 404


def test_update_clears_phone_with_null(client):
    role = _create_role(client)
    employee = _create_employee(client, role["id"], phone="555-0100").json()
    assert employee["phone"] == "555-0100"

    response = client.put(f"/api/employees/{employee['id']}", json={"phone": None})
    assert response.status_code == 200
    assert response.json()["phone"] is None
    assert client.get(f"/api/employees/{employee['id']}").json()["phone"] is None

    # other fields cannot be blanked out
    assert client.put(f"/api/employees/{employee['id']}", json={"first_name": None}).status_code == 422
    assert client.put(f"/api/roles/{role['id']}", json={"title": None}).status_code == 422
    assert client.get(f"/api/employees/{employee['id']}").json()["first_name"] == "Ada"


def test_reassign_employee_after_role_deleted(client):
    old_role = _create_role(client)
    new_role = _create_role(client, title="Staff Developer")
    employee = _create_employee(client, old_role["id"]).json()
    assert client.delete(f"/api/roles/{old_role['id']}").status_code == 200
    assert client.get(f"/api/employees/{employee['id']}").status_code == 404

    response = client.put(f"/api/employees/{employee['id']}", json={"role_id": new_role["id"]})
    assert response.status_code == 200
    assert response.json()["role_id"] == new_role["id"]

    rejoined = client.get(f"/api/employees/{employee['id']}").json()
    assert rejoined["role"]["title"] == "Staff Developer"


def test_update_salary_revalidated_when_enabled(tmp_path, monkeypatch):
    monkeypatch.setenv("HRDESK_SEED_SAMPLE_ROLES", "0")
    monkeypatch.setenv("HRDESK_VALIDATE_SALARY_ON_UPDATE", "true")
    from hrdesk.app import create_app

    with TestClient(create_app()) as client:
        role = _create_role(client)
        employee = _create_employee(client, role["id"]).json()

        response = client.put(f"/api/employees/{employee['id']}", json={"salary": 500000})
        assert response.status_code == 400
        assert response.json()["detail"] == "Salary must be between 75000 and 100000 for this role"

        response = client.put(f"/api/employees/{employee['id']}", json={"salary": 99000})
        assert response.status_code == 200


def test_calculate_full_time_payslip(client):
    role = _create_role(client)
    employee = _create_employee(client, role["id"]).json()

    response = client.post("/api/payslips/calculate", json={"employee_id": employee["id"], "hours_worked": 0})
    assert response.status_code == 200
    body = response.json()
    assert _money(body["base_pay"]) == Decimal("8000.00")
    assert _money(body["overtime_pay"]) == Decimal("0")
    assert _money(body["gross_pay"]) == Decimal("8000.00")
    assert _money(body["net_pay"]) == Decimal("8000.00")

    response = client.post(
        "/api/payslips/calculate",
        json={"employee_id": employee["id"], "hours_worked": 160, "overtime_hours": 10},
    )
    body = response.json()
    assert _money(body["overtime_pay"]) == Decimal("692.31")
    assert _money(body["gross_pay"]) == Decimal("8692.31")


def test_calculate_part_time_payslip(client):
    role = _create_role(client, title="UI Designer", min_salary=25, max_salary=45)
    employee = _create_employee(client, role["id"], type="part-time", salary=25).json()

    response = client.post(
        "/api/payslips/calculate",
        json={"employee_id": employee["id"], "hours_worked": 80, "overtime_hours": 5, "deductions": 50},
    )
    assert response.status_code == 200
    body = response.json()
    assert _money(body["base_pay"]) == Decimal("2000")
    assert _money(body["overtime_pay"]) == Decimal("187.5")
    assert _money(body["gross_pay"]) == Decimal("2187.5")
    assert _money(body["deductions"]) == Decimal("50")
    assert _money(body["net_pay"]) == Decimal("2137.5")
    assert _money(body["hours_worked"]) == Decimal("80")
    assert _money(body["overtime_hours"]) == Decimal("5")


def test_calculate_rejects_bad_requests(client):
    role = _create_role(client)
    employee = _create_employee(client, role["id"]).json()

    response = client.post("/api/payslips/calculate", json={"employee_id": 999, "hours_worked": 10})
    assert response.status_code == 404

    response = client.post("/api/payslips/calculate", json={"employee_id": employee["id"]})
    assert response.status_code == 422

    for field in ("hours_worked", "overtime_hours", "deductions"):
        payload = {"employee_id": employee["id"], "hours_worked": 10, field: -1}
        assert client.post("/api/payslips/calculate", json=payload).status_code == 422


def test_calculate_with_corrupted_employee_type(client):
    role = _create_role(client)
    employee = _create_employee(client, role["id"]).json()

    repository = client.app.state.hr_service._repository
    repository.update_employee(employee["id"], {"type": "contractor"})

    response = client.post("/api/payslips/calculate", json={"employee_id": employee["id"], "hours_worked": 10})
    assert response.status_code == 422
    assert response.json()["detail"] == "Unknown employee type: contractor"

    stats = client.get("/api/stats").json()
    assert stats["total_employees"] == 0


def test_payslip_storage_and_reports(client, tmp_path):
    role = _create_role(client)
    employee = _create_employee(client, role["id"]).json()

    payslip = {
        "employee_id": employee["id"],
        "pay_period_from": "2025-01-01T00:00:00",
        "pay_period_to": "2025-01-31T00:00:00",
        "hours_worked": 160,
        "base_pay": 8000,
        "gross_pay": 8000,
        "deductions": 100,
        "net_pay": 7900,
    }
    response = client.post("/api/payslips", json=payslip)
    assert response.status_code == 201
    first = response.json()
    assert first["status"] == "generated"

    second = client.post("/api/payslips", json={**payslip, "net_pay": 7800}).json()

    response = client.post("/api/payslips", json={**payslip, "employee_id": 999})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid employee ID"

    items = client.get("/api/payslips").json()
    assert [item["id"] for item in items] == [second["id"], first["id"]]
    assert items[0]["employee"]["email"] == "ada@example.com"

    assert len(client.get(f"/api/employees/{employee['id']}/payslips").json()) == 2
    assert client.get(f"/api/payslips/{first['id']}").json()["employee"]["id"] == employee["id"]

    response = client.put(f"/api/payslips/{first['id']}", json={"status": "paid"})
    assert response.json()["status"] == "paid"

    response = client.get("/api/reports/payslips", params={"format": "csv"})
    assert response.status_code == 200
    rows = list(csv.DictReader(response.text.splitlines()))
    assert len(rows) == 2
    assert rows[0]["employee"] == "Ada Lovelace"
    assert {row["status"] for row in rows} == {"generated", "paid"}

    response = client.get("/api/reports/bank-transfers", params={"format": "xlsx"})
    assert response.status_code == 200
    exported = list((tmp_path / "reports").glob("bank-transfers-*.xlsx"))
    assert len(exported) == 1
    sheet = load_workbook(exported[0]).active
    header = [cell.value for cell in sheet[1]]
    assert header == ["employee", "email", "amount", "period_from", "period_to"]
    assert sheet.max_row == 3

    assert client.get("/api/reports/payslips", params={"format": "pdf"}).status_code == 400

    assert client.delete(f"/api/payslips/{first['id']}").status_code == 200
    assert client.get(f"/api/payslips/{first['id']}").status_code == 404


def test_stats(client):
    engineering = _create_role(client)
    design = _create_role(client, title="UI Designer", min_salary=25, max_salary=45)
    _create_employee(client, engineering["id"], email="a@example.com", salary=96000)
    _create_employee(client, engineering["id"], email="b@example.com", salary=84000)
    _create_employee(client, design["id"], email="c@example.com", type="part-time", salary=30)
    _create_employee(client, design["id"], email="d@example.com", type="part-time", salary=30, status="inactive")

    stats = client.get("/api/stats").json()
    assert stats == {
        "total_employees": 3,
        "full_time_employees": 2,
        "part_time_employees": 1,
        "monthly_payroll": 8000 + 7000 + 2400,
    }


def test_stats_count_employees_whose_role_was_deleted(client):
    role = _create_role(client)
    _create_employee(client, role["id"], salary=96000)
    assert client.delete(f"/api/roles/{role['id']}").status_code == 200

    stats = client.get("/api/stats").json()
    assert stats["total_employees"] == 1
    assert stats["full_time_employees"] == 1
    assert stats["monthly_payroll"] == 8000


def test_sample_roles_seeded_by_default(monkeypatch):
    monkeypatch.setenv("HRDESK_SEED_SAMPLE_ROLES", "1")
    from hrdesk.app import create_app

    with TestClient(create_app()) as client:
        roles = client.get("/api/roles").json()

    assert [role["title"] for role in roles] == ["Senior Developer", "Product Manager", "UI Designer"]
    assert roles[0]["responsibilities"][0] == "Code development and review"
