from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum


class StoredRole(str, Enum):
    """
    Назначение:
        Роль сотрудника в кодировке хранилища.
    """

    ADMIN = "ADMIN"
    GENERAL = "GENERAL"


class StoredDeleteFlag(str, Enum):
    """
    Назначение:
        Признак удаления сотрудника в кодировке хранилища.
    """

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


class ViewRole(IntEnum):
    """
    Назначение:
        Роль сотрудника в кодировке представления (значения формы ввода).
    """

    GENERAL = 0
    ADMIN = 1


class ViewDeleteFlag(IntEnum):
    """
    Назначение:
        Признак удаления в кодировке представления.
    """

    ACTIVE = 0
    DELETED = 1


@dataclass
class Employee:
    """
    Назначение:
        Сотрудник в представлении хранилища.

    Инварианты:
        - id отсутствует у ещё не сохранённой записи.
        - admin_flag/delete_flag либо None, либо StoredRole/StoredDeleteFlag.
          Исключение: copy_all_fields кладёт сюда сырые int из EmployeeView.
    """

    id: int | None = None
    code: str | None = None
    name: str | None = None
    password: str | None = None
    admin_flag: StoredRole | int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    delete_flag: StoredDeleteFlag | int | None = None


@dataclass
class EmployeeView:
    """
    Назначение:
        Сотрудник в представлении ввода/вывода.

    Инварианты:
        - admin_flag/delete_flag: int (ViewRole/ViewDeleteFlag) или None.
        - Ошибки валидации сюда не записываются, они возвращаются отдельно.
    """

    id: int | None = None
    code: str | None = None
    name: str | None = None
    password: str | None = None
    admin_flag: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    delete_flag: int | None = None


@dataclass
class ValidationErrorItem:
    """
    Назначение:
        Одна ошибка валидации: стабильный ключ сообщения, поле и текст.
    """

    code: str
    field: str | None
    message: str
