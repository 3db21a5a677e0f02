from __future__ import annotations

import json

from src.employee_scheduling.employee_scheduling.console.menu import run_menu


def _feed(monkeypatch, *answers: str) -> None:
    it = iter(answers)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_show_all_employees_prints_fixed_width_table(monkeypatch, capsys, container):
    _feed(monkeypatch, "1", "4")

    run_menu(container)

    out = capsys.readouterr().out
    assert "Employee ID  Name                Phone" in out
    assert "E001" + " " * 9 + "Ava Thompson" + " " * 8 + "5551-0101" in out
    assert out.rstrip().endswith("Goodbye")


def test_add_employee_writes_record(monkeypatch, capsys, container, data_dir):
    _feed(monkeypatch, "2", "Dan Wu", "5551-0104", "4")

    run_menu(container)

    assert "Employee added..." in capsys.readouterr().out
    records = json.loads((data_dir / "employees.json").read_text(encoding="utf-8"))
    assert records[-1] == {"employeeId": "E004", "name": "Dan Wu", "phone": "5551-0104"}


def test_add_employee_with_bad_phone_is_not_saved(monkeypatch, capsys, container, data_dir):
    _feed(monkeypatch, "2", "Dan Wu", "555", "4")

    run_menu(container)

    out = capsys.readouterr().out
    assert "Validation failed: Phone must be 4 digits, a dash, then 4 digits" in out
    assert "Employee added..." not in out
    assert len(json.loads((data_dir / "employees.json").read_text(encoding="utf-8"))) == 3


def test_view_schedule_prints_csv(monkeypatch, capsys, container):
    _feed(monkeypatch, "3", "E001", "4")

    run_menu(container)

    out = capsys.readouterr().out
    assert "date,start,end\n2026-06-01,08:00,12:00\n" in out


def test_unknown_choice_prints_error_and_loops(monkeypatch, capsys, container):
    _feed(monkeypatch, "9", "abc", "4")

    run_menu(container)

    out = capsys.readouterr().out
    assert out.count("Error \n") == 2
    assert out.count("1. Show all employees") == 3


def test_end_of_input_exits(monkeypatch, capsys, container):
    _feed(monkeypatch)

    run_menu(container)

    assert capsys.readouterr().out.rstrip().endswith("Goodbye")


def test_numeric_spellings_of_a_choice_are_accepted(monkeypatch, capsys, container):
    _feed(monkeypatch, "1.0", "4e0")

    run_menu(container)

    out = capsys.readouterr().out
    assert "Error " not in out
    assert "E001" in out
    assert out.rstrip().endswith("Goodbye")


def test_fractional_choice_is_an_error(monkeypatch, capsys, container):
    _feed(monkeypatch, "1.5", "4")

    run_menu(container)

    assert capsys.readouterr().out.count("Error \n") == 1
