from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmployeeCodeLookupProtocol(Protocol):
    """
    Назначение:
        Абстракция для проверки дубликатов кода сотрудника при валидации.

    Контракт:
        - count_by_code(code: str) -> int
            Число сохранённых сотрудников с таким кодом; 0, если таких нет.
        - Ошибки хранилища пробрасываются вызывающему.
    """

    def count_by_code(self, code: str) -> int: ...


__all__ = ["EmployeeCodeLookupProtocol"]
