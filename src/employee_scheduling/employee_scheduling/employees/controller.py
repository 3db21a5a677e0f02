from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

NOT_FOUND_TEXT = "Employee not found"


def register(app: Flask, container: Container) -> None:
    def _system_error(action: str, e: Exception):
        logger.exception("Unexpected error while %s", action)
        if bool(app.config.get("DEBUG", False)):
            return f"System error while {action}: {e}", 500
        return f"System error while {action}", 500

    @app.route("/", endpoint="home")
    def home():
        employees = container.employee_service.list_employees()
        return render_template("home.html", employees=employees)

    @app.route("/employees/<employee_id>", endpoint="employee_detail")
    def employee_detail(employee_id: str):
        employee = container.employee_service.get_employee(employee_id)
        if not employee:
            return NOT_FOUND_TEXT, 404

        shifts = container.schedule_service.get_schedule_sorted(employee_id)
        return render_template("employee.html", employee=employee, shifts=shifts)

    @app.route("/employees/<employee_id>/edit", methods=["GET"], endpoint="edit_employee")
    def edit_employee(employee_id: str):
        employee = container.employee_service.get_employee(employee_id)
        if not employee:
            return NOT_FOUND_TEXT, 404
        return render_template("edit_employee.html", employee=employee)

    @app.route("/employees/<employee_id>/edit", methods=["POST"], endpoint="edit_employee_submit")
    def edit_employee_submit(employee_id: str):
        if not container.employee_service.get_employee(employee_id):
            return NOT_FOUND_TEXT, 404

        try:
            container.employee_service.update_employee(
                employee_id=employee_id,
                name=request.form.get("name", ""),
                phone=request.form.get("phone", ""),
            )
        except ValidationError as e:
            return str(e)
        except NotFoundError:
            return NOT_FOUND_TEXT, 404
        except Exception as e:
            return _system_error("updating employee", e)

        # Post/Redirect/Get back to the landing page.
        return redirect(url_for("home"))
