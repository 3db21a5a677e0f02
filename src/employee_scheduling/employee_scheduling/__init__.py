"""Employee Scheduling package.

Organized by feature modules (employees, shifts, assignments, schedules, ...)
with thin Flask controller / console layers on top of service and repository
layers. Repositories come in two flavours: flat JSON files and MySQL.
"""
