from __future__ import annotations

import json

import pytest

from src.employee_scheduling.employee_scheduling.main import create_app


@pytest.fixture
def app(data_dir, settings_file):
    return create_app(
        overrides={
            "STORAGE_BACKEND": "json",
            "DATA_DIR": str(data_dir),
            "SETTINGS_FILE": str(settings_file),
            "TESTING": True,
            "DEBUG": False,
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()


def _employees(data_dir):
    return json.loads((data_dir / "employees.json").read_text(encoding="utf-8"))


def test_home_lists_employees(client):
    resp = client.get("/")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Ava Thompson" in body
    assert "/employees/E003" in body


def test_employee_page_shows_shifts_and_marks_mornings(client):
    resp = client.get("/employees/E001")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "5551-0101" in body
    assert "S001" in body
    assert 'class="morning"' in body


def test_employee_page_sorts_by_date_then_start(client):
    assert client.post("/employees/E003/assign", data={"shift_id": "S004"}).status_code == 302
    assert client.post("/employees/E003/assign", data={"shift_id": "S002"}).status_code == 302

    body = client.get("/employees/E003").get_data(as_text=True)
    assert body.index("S002") < body.index("S004")


def test_unknown_employee_is_404(client):
    for path in ("/employees/E999", "/employees/E999/edit", "/employees/E999/assign"):
        resp = client.get(path)
        assert resp.status_code == 404
        assert resp.get_data(as_text=True) == "Employee not found"


def test_edit_form_is_prefilled(client):
    body = client.get("/employees/E002/edit").get_data(as_text=True)

    assert 'value="Ben Carter"' in body
    assert 'value="5551-0102"' in body


def test_edit_submit_saves_and_redirects_home(client, data_dir):
    resp = client.post("/employees/E002/edit", data={"name": "  Benjamin Carter ", "phone": "1234-5678"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
    assert _employees(data_dir)[1] == {"employeeId": "E002", "name": "Benjamin Carter", "phone": "1234-5678"}


def test_edit_submit_blank_name_is_reported_inline(client, data_dir):
    resp = client.post("/employees/E002/edit", data={"name": "   ", "phone": "1234-5678"})

    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Validation failed: Name must be non-empty"
    assert _employees(data_dir)[1]["name"] == "Ben Carter"


def test_edit_submit_bad_phone_is_reported_inline(client):
    resp = client.post("/employees/E002/edit", data={"name": "Ben", "phone": "12345678"})

    assert resp.get_data(as_text=True) == "Validation failed: Phone must be 4 digits, a dash, then 4 digits"


def test_edit_submit_missing_fields(client):
    resp = client.post("/employees/E002/edit", data={})

    assert resp.get_data(as_text=True) == "Validation failed: Name must be non-empty"


def test_edit_submit_unknown_employee_is_404(client):
    resp = client.post("/employees/E999/edit", data={"name": "X", "phone": "1234-5678"})

    assert resp.status_code == 404


def test_assign_form_lists_shifts(client):
    body = client.get("/employees/E001/assign").get_data(as_text=True)

    assert 'value="S005"' in body


def test_assign_submit_success_redirects_to_employee(client, data_dir):
    resp = client.post("/employees/E001/assign", data={"shift_id": "S002"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/employees/E001")
    assignments = json.loads((data_dir / "assignments.json").read_text(encoding="utf-8"))
    assert {"employeeId": "E001", "shiftId": "S002"} in assignments


def test_assign_submit_duplicate_is_reported(client):
    resp = client.post("/employees/E001/assign", data={"shift_id": "S001"})

    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Employee already assigned to shift"


def test_assign_submit_over_daily_cap_is_reported(client, data_dir):
    before = (data_dir / "assignments.json").read_text(encoding="utf-8")

    resp = client.post("/employees/E002/assign", data={"shift_id": "S005"})

    assert resp.get_data(as_text=True) == "Cannot assign shift: maxDailyHours limit would be exceeded."
    assert (data_dir / "assignments.json").read_text(encoding="utf-8") == before


def test_assign_submit_unknown_shift(client):
    resp = client.post("/employees/E001/assign", data={"shift_id": "S999"})

    assert resp.get_data(as_text=True) == "Shift does not exist"
