from __future__ import annotations

import logging

from ..container import Container
from ..core.exceptions import DomainError
from ..main import build_from_settings, configure_logging, load_settings

MENU_LINES = (
    "1. Show all employees",
    "2. Add new employee",
    "3. View employee schedule",
    "4. Exit",
)


def show_employee_table(container: Container) -> None:
    print("Employee ID  Name                Phone")
    print("-----------  ------------------- ---------")
    for emp in container.employee_service.list_employees():
        print(emp.employee_id.ljust(13) + emp.name.ljust(20) + emp.phone)


def create_employee_ui(container: Container) -> None:
    name = input("Enter employee name: ")
    phone = input("Enter phone number: ")

    try:
        container.employee_service.add_employee(name=name, phone=phone)
    except DomainError as e:
        print(e)
        return
    print("Employee added...")


def print_employee_schedule(container: Container) -> None:
    employee_id = input("Enter employee ID: ")
    shifts = container.schedule_service.get_schedule(employee_id)

    print("")
    print("date,start,end")
    for s in shifts:
        print(f"{s.date},{s.start_time},{s.end_time}")


def _read_choice() -> int | None:
    """Any numeric spelling of a whole number counts ("2", "2.0", "2e0")."""
    try:
        number = float(input("What is your choice> ").strip())
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


def run_menu(container: Container) -> None:
    actions = {
        1: show_employee_table,
        2: create_employee_ui,
        3: print_employee_schedule,
    }

    while True:
        for line in MENU_LINES:
            print(line)

        try:
            choice = _read_choice()
        except EOFError:
            break

        if choice == 4:
            break
        action = actions.get(choice)
        if action is None:
            print("Error ")
            continue

        action(container)
        print("\n\n")

    print("Goodbye")


def main() -> None:
    settings = load_settings()
    configure_logging(logging.WARNING)
    run_menu(build_from_settings(settings))


if __name__ == "__main__":
    main()
