from __future__ import annotations

import logging

from employee_admin.domain.messages import DEFAULT_CATALOG, MessageCatalog, MessageKey
from employee_admin.domain.models import EmployeeView, ValidationErrorItem
from employee_admin.domain.ports.lookups import EmployeeCodeLookupProtocol


def _is_blank(value: str | None) -> bool:
    return value is None or value == ""


def count_duplicates(lookup: EmployeeCodeLookupProtocol, code: str) -> int:
    """
    Назначение:
        Число сохранённых сотрудников с тем же кодом.

    Контракт:
        - Ошибка lookup не перехватывается.
    """
    return lookup.count_by_code(code)


def validate_code(
    lookup: EmployeeCodeLookupProtocol | None,
    code: str | None,
    check_code_duplicate: bool,
) -> MessageKey | None:
    """
    Назначение:
        Проверка кода сотрудника.

    Контракт:
        - Пустой код -> E_NOEMP_CODE, lookup не вызывается.
        - check_code_duplicate=False -> lookup не вызывается вовсе.
        - count_by_code(code) > 0 -> E_EMP_CODE_EXIST.
    """
    if _is_blank(code):
        return MessageKey.E_NOEMP_CODE

    if check_code_duplicate:
        if lookup is None:
            raise ValueError("Duplicate check requested without a code lookup")
        if count_duplicates(lookup, code) > 0:
            return MessageKey.E_EMP_CODE_EXIST

    return None


def validate_name(name: str | None) -> MessageKey | None:
    if _is_blank(name):
        return MessageKey.E_NONAME
    return None


def validate_password(password: str | None, check_password: bool) -> MessageKey | None:
    """
    Назначение:
        Проверка пароля. При check_password=False пустой пароль допустим
        (обновление без смены пароля).
    """
    if check_password and _is_blank(password):
        return MessageKey.E_NOPASSWORD
    return None


def validate_items(
    lookup: EmployeeCodeLookupProtocol | None,
    view: EmployeeView,
    check_code_duplicate: bool,
    check_password: bool,
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> list[ValidationErrorItem]:
    """
    Назначение:
        Выполнить проверки code -> name -> password и собрать все ошибки.

    Выходные данные:
        list[ValidationErrorItem]
            Пустой список означает, что запись валидна.
    """
    checks = (
        ("code", validate_code(lookup, view.code, check_code_duplicate)),
        ("name", validate_name(view.name)),
        ("password", validate_password(view.password, check_password)),
    )
    return [
        ValidationErrorItem(code=key.value, field=field, message=catalog.get(key))
        for field, key in checks
        if key is not None
    ]


def validate(
    lookup: EmployeeCodeLookupProtocol | None,
    view: EmployeeView,
    check_code_duplicate: bool,
    check_password: bool,
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> list[str]:
    """
    Назначение:
        То же, что validate_items, но возвращает только тексты сообщений
        в порядке проверок.
    """
    items = validate_items(lookup, view, check_code_duplicate, check_password, catalog)
    return [item.message for item in items]


def logValidationFailure(
    logger: logging.Logger,
    run_id: str,
    context: str,
    line_no: int | None,
    errors: list[ValidationErrorItem],
) -> None:
    """
    Назначение:
        Логирует невалидную запись по ключам ошибок (без значений полей).
    """
    code_str = ",".join(e.code for e in errors) if errors else "none"
    logger.log(
        logging.WARNING,
        f"invalid employee line={line_no} errors={code_str}",
        extra={"runId": run_id, "component": context},
    )
