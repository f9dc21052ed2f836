from __future__ import annotations

from typing import Any, Iterable

from employee_admin.domain.models import (
    Employee,
    EmployeeView,
    StoredDeleteFlag,
    StoredRole,
    ViewDeleteFlag,
    ViewRole,
)


def is_known_role(value: Any) -> bool:
    """
    Проверяет, что значение роли из представления входит в ViewRole.
    """
    return value in (ViewRole.ADMIN, ViewRole.GENERAL)


def is_known_delete_flag(value: Any) -> bool:
    """
    Проверяет, что признак удаления из представления входит в ViewDeleteFlag.
    """
    return value in (ViewDeleteFlag.ACTIVE, ViewDeleteFlag.DELETED)


def role_to_stored(value: int | None) -> StoredRole | None:
    """
    Назначение:
        Роль представления -> роль хранилища.

    Контракт:
        - None -> None.
        - ViewRole.ADMIN -> StoredRole.ADMIN.
        - Любое другое целое (в том числе вне домена) -> StoredRole.GENERAL.
    """
    if value is None:
        return None
    return StoredRole.ADMIN if value == ViewRole.ADMIN else StoredRole.GENERAL


def role_to_view(value: Any) -> ViewRole | None:
    """
    Назначение:
        Роль хранилища -> роль представления.

    Контракт:
        - None -> None (проверяется до сравнения).
        - StoredRole.ADMIN -> ViewRole.ADMIN, иначе ViewRole.GENERAL.
    """
    if value is None:
        return None
    return ViewRole.ADMIN if value == StoredRole.ADMIN else ViewRole.GENERAL


def delete_flag_to_stored(value: int | None) -> StoredDeleteFlag | None:
    """
    Назначение:
        Признак удаления представления -> признак хранилища.

    Контракт:
        - None -> None.
        - ViewDeleteFlag.DELETED -> StoredDeleteFlag.DELETED, иначе ACTIVE.
    """
    if value is None:
        return None
    return StoredDeleteFlag.DELETED if value == ViewDeleteFlag.DELETED else StoredDeleteFlag.ACTIVE


def delete_flag_to_view(value: Any) -> ViewDeleteFlag | None:
    """
    Назначение:
        Признак удаления хранилища -> признак представления.
    """
    if value is None:
        return None
    return ViewDeleteFlag.DELETED if value == StoredDeleteFlag.DELETED else ViewDeleteFlag.ACTIVE


def to_persistence(view: EmployeeView) -> Employee:
    """
    Назначение:
        Построить Employee из EmployeeView с переводом категориальных флагов.

    Инварианты:
        - Отсутствующий флаг остаётся отсутствующим.
    """
    return Employee(
        id=view.id,
        code=view.code,
        name=view.name,
        password=view.password,
        admin_flag=role_to_stored(view.admin_flag),
        created_at=view.created_at,
        updated_at=view.updated_at,
        delete_flag=delete_flag_to_stored(view.delete_flag),
    )


def to_presentation(employee: Employee | None) -> EmployeeView | None:
    """
    Назначение:
        Построить EmployeeView из Employee.

    Контракт:
        - None на входе -> None на выходе (это не ошибка).
    """
    if employee is None:
        return None

    return EmployeeView(
        id=employee.id,
        code=employee.code,
        name=employee.name,
        password=employee.password,
        admin_flag=role_to_view(employee.admin_flag),
        created_at=employee.created_at,
        updated_at=employee.updated_at,
        delete_flag=delete_flag_to_view(employee.delete_flag),
    )


def to_presentation_list(employees: Iterable[Employee]) -> list[EmployeeView]:
    """
    Назначение:
        Поэлементно применить to_presentation, сохраняя порядок и длину.
    """
    return [to_presentation(employee) for employee in employees]


def copy_all_fields(destination: Employee, source: EmployeeView) -> None:
    """
    Назначение:
        Скопировать все поля EmployeeView в существующий Employee.

    Контракт:
        - Флаги копируются как есть, без перевода кодировок: в admin_flag и
          delete_flag попадают целые значения представления.
        - Это отдельная операция, не замена to_persistence.
    """
    destination.id = source.id
    destination.code = source.code
    destination.name = source.name
    destination.password = source.password
    destination.admin_flag = source.admin_flag
    destination.created_at = source.created_at
    destination.updated_at = source.updated_at
    destination.delete_flag = source.delete_flag
