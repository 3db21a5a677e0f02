"""Development entry point for the web front-end.

    $ python app.py

serves on http://localhost:3090 (override with PORT). The console menu lives
in ``scripts/console_menu.py``.
"""

from src.employee_scheduling.employee_scheduling.main import run

if __name__ == "__main__":
    run()
