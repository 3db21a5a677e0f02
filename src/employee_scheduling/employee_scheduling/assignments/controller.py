from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, url_for

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/<employee_id>/assign", methods=["GET"], endpoint="assign_shift")
    def assign_shift(employee_id: str):
        employee = container.employee_service.get_employee(employee_id)
        if not employee:
            return "Employee not found", 404

        return render_template(
            "assign_shift.html",
            employee=employee,
            shifts=container.shifts_repo.list_all(),
            assigned=container.schedule_service.get_schedule_sorted(employee_id),
        )

    @app.route("/employees/<employee_id>/assign", methods=["POST"], endpoint="assign_shift_submit")
    def assign_shift_submit(employee_id: str):
        shift_id = request.form.get("shift_id", "")
        try:
            result = container.assignment_service.assign_shift(employee_id, shift_id)
        except Exception as e:
            logger.exception("Unexpected error while assigning %s -> %s", employee_id, shift_id)
            if bool(app.config.get("DEBUG", False)):
                return f"System error while assigning shift: {e}", 500
            return "System error while assigning shift", 500

        if not result.ok:
            return result.message
        return redirect(url_for("employee_detail", employee_id=employee_id))
