"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from employee_management.config import get_settings_module
from employee_management.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    alice = container.registry.add(name="Alice", salary=50000, department="Engineering")
    container.registry.add(name="Bob", salary=25.0, wage_kind="hourly", department="Engineering")
    container.vacation_service.take_vacation(alice, 3)

    for e in container.registry.list(department="Engineering"):
        print(e.to_dict())
    print(container.payroll_service.build_payroll_report(hours_by_employee={2: 160}))


if __name__ == "__main__":
    main()
