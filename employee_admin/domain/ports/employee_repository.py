from __future__ import annotations

from typing import Protocol

from employee_admin.domain.models import Employee
from employee_admin.domain.ports.lookups import EmployeeCodeLookupProtocol


class EmployeeRepository(EmployeeCodeLookupProtocol, Protocol):
    """
    Назначение:
        Порт хранилища сотрудников для use-case'ов регистрации/обновления.
    """

    def insert(self, employee: Employee) -> int: ...

    def update(self, employee: Employee) -> None: ...

    def get_by_id(self, employee_id: int) -> Employee | None: ...

    def list_all(self, include_deleted: bool = True) -> list[Employee]: ...
