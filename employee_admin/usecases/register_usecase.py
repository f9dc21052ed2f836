from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable

from employee_admin.common.time import getNow
from employee_admin.domain.mappers.employee_converter import to_persistence
from employee_admin.domain.messages import MessageCatalog
from employee_admin.domain.models import EmployeeView, ViewDeleteFlag
from employee_admin.domain.ports.employee_repository import EmployeeRepository
from employee_admin.domain.validation.employee_validator import logValidationFailure, validate_items
from employee_admin.infra.logging.setup import logEvent
from employee_admin.usecases.results import FailedRecord, RunResult


class RegisterEmployeesUseCase:
    """
    Назначение/ответственность:
        Регистрация новых сотрудников: validate -> to_persistence -> insert.

    Инварианты:
        - Проверяются дубликат кода и наличие пароля.
        - Невалидная запись не попадает в хранилище.
        - id из входа игнорируется, его назначает хранилище.
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
            errors = validate_items(self.repository, view, True, True, self.catalog)
            if errors:
                result.failures.append(FailedRecord(line_no=line_no, employee_code=view.code, errors=errors))
                logValidationFailure(logger, run_id, "register", line_no, errors)
                continue

            now = self.clock()
            prepared = replace(
                view,
                id=None,
                created_at=now,
                updated_at=now,
                delete_flag=ViewDeleteFlag.ACTIVE if view.delete_flag is None else view.delete_flag,
            )
            new_id = self.repository.insert(to_persistence(prepared))
            result.succeeded += 1
            logEvent(logger, logging.INFO, run_id, "register", f"employee created id={new_id} code={view.code}")
        return result
