from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable

from employee_admin.common.time import getNow
from employee_admin.domain.mappers.employee_converter import to_persistence, to_presentation
from employee_admin.domain.messages import MessageCatalog, MessageKey
from employee_admin.domain.models import EmployeeView, ValidationErrorItem
from employee_admin.domain.ports.employee_repository import EmployeeRepository
from employee_admin.domain.validation.employee_validator import logValidationFailure, validate_items
from employee_admin.infra.logging.setup import logEvent
from employee_admin.usecases.results import FailedRecord, RunResult


class UpdateEmployeesUseCase:
    """
    Назначение/ответственность:
        Обновление существующих сотрудников по id.

    Поведение:
        - Дубликат кода проверяется только при смене кода.
        - Пароль не обязателен: пустой пароль оставляет сохранённый.
        - created_at сохраняется, updated_at обновляется.
        - Флаги берутся из входа целиком, отсутствующий флаг пишется как NULL.
    """

    def __init__(
        self,
        repository: EmployeeRepository,
        catalog: MessageCatalog,
        clock: Callable[[], datetime] = getNow,
    ) -> None:
        self.repository = repository
        self.catalog = catalog
        self.clock = clock

    def run(
        self,
        source: Iterable[tuple[int, EmployeeView]],
        logger: logging.Logger,
        run_id: str,
    ) -> RunResult:
        # Вход читается целиком до первой записи в хранилище.
        rows = list(source)
        result = RunResult()
        for line_no, view in rows:
            result.total += 1
            stored = to_presentation(self.repository.get_by_id(view.id)) if view.id is not None else None
            if stored is None:
                errors = [
                    ValidationErrorItem(
                        code=MessageKey.E_EMP_NOT_FOUND.value,
                        field="id",
                        message=self.catalog.get(MessageKey.E_EMP_NOT_FOUND),
                    )
                ]
            else:
                code_changed = view.code != stored.code
                errors = validate_items(self.repository, view, code_changed, False, self.catalog)
            if errors:
                result.failures.append(FailedRecord(line_no=line_no, employee_code=view.code, errors=errors))
                logValidationFailure(logger, run_id, "update", line_no, errors)
                continue

            merged = replace(
                view,
                password=view.password if view.password else stored.password,
                created_at=stored.created_at,
                updated_at=self.clock(),
            )
            self.repository.update(to_persistence(merged))
            result.succeeded += 1
            logEvent(logger, logging.INFO, run_id, "update", f"employee updated id={view.id} code={view.code}")
        return result
