from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .assignments.json_assignment_repository import JsonAssignmentRepository
from .assignments.mysql_assignment_repository import MySQLAssignmentRepository
from .assignments.repository import AssignmentRepository
from .assignments.service import AssignmentService
from .core.enums import StorageBackend
from .database.connection import DatabaseConnection, DBConfig
from .database.json_store import JsonFileStore
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .schedules.service import ScheduleService
from .settings.json_settings_repository import JsonSettingsRepository
from .settings.repository import SettingsRepository
from .shifts.json_shift_repository import JsonShiftRepository
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    backend: StorageBackend

    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    assignments_repo: AssignmentRepository
    settings_repo: SettingsRepository

    employee_service: EmployeeService
    assignment_service: AssignmentService
    schedule_service: ScheduleService


def build_container(
    *,
    storage: str | StorageBackend = StorageBackend.JSON,
    data_dir: str | Path = "data",
    settings_file: str | Path = "config.json",
    db_config: Optional[dict] = None,
) -> Container:
    backend = StorageBackend(storage)

    if backend == StorageBackend.MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
        employees_repo = MySQLEmployeeRepository(conn)
        shifts_repo = MySQLShiftRepository(conn)
        assignments_repo = MySQLAssignmentRepository(conn)
    else:
        store = JsonFileStore(data_dir)
        employees_repo = JsonEmployeeRepository(store)
        shifts_repo = JsonShiftRepository(store)
        assignments_repo = JsonAssignmentRepository(store)

    settings_repo = JsonSettingsRepository(settings_file)
    logger.debug("Built container: backend=%s settings=%s", backend.value, settings_file)

    return Container(
        backend=backend,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        assignments_repo=assignments_repo,
        settings_repo=settings_repo,
        employee_service=EmployeeService(employees_repo),
        assignment_service=AssignmentService(assignments_repo, employees_repo, shifts_repo, settings_repo),
        schedule_service=ScheduleService(assignments_repo),
    )
