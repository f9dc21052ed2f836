from __future__ import annotations

from dataclasses import dataclass, field

from employee_admin.domain.models import ValidationErrorItem


@dataclass
class FailedRecord:
    """
    Назначение:
        Запись входного файла, не прошедшая валидацию.
    """

    line_no: int
    employee_code: str | None
    errors: list[ValidationErrorItem]


@dataclass
class RunResult:
    """
    Назначение:
        Итог обработки входного набора сотрудников.
    """

    total: int = 0
    succeeded: int = 0
    failures: list[FailedRecord] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures
