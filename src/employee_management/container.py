from __future__ import annotations

from dataclasses import dataclass

from .company.model import Company
from .core.constants import DEFAULT_COMPANY_NAME, DEFAULT_VACATION_DAYS
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeRegistry, VacationService
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository

    registry: EmployeeRegistry
    vacation_service: VacationService
    payroll_service: PayrollService

    company: Company


def build_container(settings=None) -> Container:
    """Wire a fresh, empty registry and the services around it."""
    company_name = getattr(settings, "COMPANY_NAME", DEFAULT_COMPANY_NAME)
    vacation_days = int(getattr(settings, "DEFAULT_VACATION_DAYS", DEFAULT_VACATION_DAYS))

    employees_repo = InMemoryEmployeeRepository()

    registry = EmployeeRegistry(employees_repo, default_vacation_days=vacation_days)
    vacation_service = VacationService(registry)
    payroll_service = PayrollService(registry)

    return Container(
        employees_repo=employees_repo,
        registry=registry,
        vacation_service=vacation_service,
        payroll_service=payroll_service,
        company=Company(name=company_name, registry=registry),
    )
