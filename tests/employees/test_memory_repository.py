from __future__ import annotations

import dataclasses

from employee_management.core.enums import Role
from employee_management.employees.memory_repository import InMemoryEmployeeRepository


def _create(repo, name):
    return repo.create(name=name, role=Role.DEVELOPER, salary=1)


def test_create_assigns_increasing_ids():
    repo = InMemoryEmployeeRepository()
    assert _create(repo, "A") == 1
    assert _create(repo, "B") == 2
    assert repo.count() == 2


def test_replace_missing_returns_false():
    repo = InMemoryEmployeeRepository()
    employee_id = _create(repo, "A")
    e = repo.get_by_id(employee_id)
    repo.delete_by_id(employee_id)

    assert repo.replace(dataclasses.replace(e, name="B")) is False
    assert repo.get_by_id(employee_id) is None


def test_delete_during_iteration_is_safe():
    repo = InMemoryEmployeeRepository()
    for name in ("A", "B", "C"):
        _create(repo, name)

    seen = []
    for e in repo.iter_all():
        seen.append(e.name)
        repo.delete_by_id(e.employee_id)

    assert seen == ["A", "B", "C"]
    assert repo.count() == 0
