from __future__ import annotations

import logging
from typing import Iterable

from employee_admin.domain.messages import MessageCatalog
from employee_admin.domain.models import EmployeeView
from employee_admin.domain.ports.lookups import EmployeeCodeLookupProtocol
from employee_admin.domain.validation.employee_validator import logValidationFailure, validate_items
from employee_admin.usecases.results import FailedRecord, RunResult


class ValidateUseCase:
    """
    Назначение/ответственность:
        Use-case для проверки набора сотрудников без записи в хранилище.
    """

    def __init__(
        self,
        lookup: EmployeeCodeLookupProtocol | None,
        catalog: MessageCatalog,
        check_code_duplicate: bool,
        check_password: bool,
    ) -> None:
        self.lookup = lookup
        self.catalog = catalog
        self.check_code_duplicate = check_code_duplicate
        self.check_password = check_password

    def run(
        self,
        source: Iterable[tuple[int, EmployeeView]],
        logger: logging.Logger,
        run_id: str,
    ) -> RunResult:
        result = RunResult()
        for line_no, view in source:
            result.total += 1
            errors = validate_items(
                self.lookup,
                view,
                self.check_code_duplicate,
                self.check_password,
                self.catalog,
            )
            if errors:
                result.failures.append(FailedRecord(line_no=line_no, employee_code=view.code, errors=errors))
                logValidationFailure(logger, run_id, "validate", line_no, errors)
                continue
            result.succeeded += 1
        return result
