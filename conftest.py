from __future__ import annotations

import pytest

from employee_management.container import build_container
from employee_management.employees.memory_repository import InMemoryEmployeeRepository
from employee_management.employees.service import EmployeeRegistry, VacationService
from employee_management.main import create_app


@pytest.fixture
def registry() -> EmployeeRegistry:
    return EmployeeRegistry(InMemoryEmployeeRepository())


@pytest.fixture
def vacation_service(registry) -> VacationService:
    return VacationService(registry)


@pytest.fixture
def app():
    return create_app("employee_management.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container():
    return build_container()
