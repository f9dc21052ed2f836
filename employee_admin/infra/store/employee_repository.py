from __future__ import annotations

import sqlite3
from datetime import datetime
from enum import Enum
from typing import Any

from employee_admin.domain.models import Employee, StoredDeleteFlag, StoredRole
from employee_admin.domain.ports.employee_repository import EmployeeRepository
from employee_admin.errors import storageError
from employee_admin.infra.store.db import transaction

_COLUMNS = "id, code, name, password, admin_flag, created_at, updated_at, delete_flag"


def _flag_to_column(value: Any, enum_cls: type[Enum], field: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value.value
    raise storageError(
        "UNTRANSLATED_FLAG",
        f"{field} must be {enum_cls.__name__} or None, got {value!r}",
        field=field,
    )


def _column_to_flag(raw: str | None, enum_cls: type[Enum], field: str) -> Any:
    if raw is None:
        return None
    try:
        return enum_cls(raw)
    except ValueError as exc:
        raise storageError("CORRUPT_FLAG", f"Unexpected {field} value in store: {raw!r}", field=field) from exc


def _ts_to_column(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _column_to_ts(raw: str | None) -> datetime | None:
    return datetime.fromisoformat(raw) if raw else None


class SqliteEmployeeRepository(EmployeeRepository):
    """
    Назначение/ответственность:
        SQLite хранилище сотрудников и реализация count_by_code для валидатора.

    Инварианты:
        - Флаги пишутся только в кодировке хранилища (StoredRole/StoredDeleteFlag).
        - Ошибки sqlite3 оборачиваются в AppError(category="storage").
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def count_by_code(self, code: str) -> int:
        try:
            row = self.conn.execute("SELECT COUNT(*) FROM employees WHERE code = ?", (code,)).fetchone()
        except sqlite3.Error as exc:
            raise storageError("LOOKUP_FAILED", f"count_by_code failed: {exc}", retryable=True) from exc
        return int(row[0])

    def insert(self, employee: Employee) -> int:
        """
        Контракт:
            Вход: несохранённый Employee.
            Выход: id новой записи.
        """
        params = self._to_params(employee)
        try:
            with transaction(self.conn):
                cur = self.conn.execute(
                    """
                    INSERT INTO employees(code, name, password, admin_flag, created_at, updated_at, delete_flag)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    params,
                )
        except sqlite3.IntegrityError as exc:
            raise storageError("CONSTRAINT_VIOLATION", f"insert failed: {exc}", employee_code=employee.code) from exc
        except sqlite3.Error as exc:
            raise storageError("WRITE_FAILED", f"insert failed: {exc}", retryable=True) from exc
        return int(cur.lastrowid)

    def update(self, employee: Employee) -> None:
        if employee.id is None:
            raise storageError("NOT_FOUND", "update requires an employee id")
        params = self._to_params(employee)
        try:
            with transaction(self.conn):
                cur = self.conn.execute(
                    """
                    UPDATE employees
                    SET code = ?, name = ?, password = ?, admin_flag = ?,
                        created_at = ?, updated_at = ?, delete_flag = ?
                    WHERE id = ?
                    """,
                    (*params, employee.id),
                )
        except sqlite3.IntegrityError as exc:
            raise storageError("CONSTRAINT_VIOLATION", f"update failed: {exc}", employee_code=employee.code) from exc
        except sqlite3.Error as exc:
            raise storageError("WRITE_FAILED", f"update failed: {exc}", retryable=True) from exc
        if cur.rowcount == 0:
            raise storageError("NOT_FOUND", f"employee id={employee.id} not found", id=employee.id)

    def get_by_id(self, employee_id: int) -> Employee | None:
        row = self.conn.execute(f"SELECT {_COLUMNS} FROM employees WHERE id = ?", (employee_id,)).fetchone()
        return self._from_row(row) if row is not None else None

    def get_by_code(self, code: str) -> Employee | None:
        row = self.conn.execute(f"SELECT {_COLUMNS} FROM employees WHERE code = ?", (code,)).fetchone()
        return self._from_row(row) if row is not None else None

    def list_all(self, include_deleted: bool = True) -> list[Employee]:
        if include_deleted:
            rows = self.conn.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY id").fetchall()
        else:
            rows = self.conn.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE delete_flag IS NOT ? ORDER BY id",
                (StoredDeleteFlag.DELETED.value,),
            ).fetchall()
        return [self._from_row(row) for row in rows]

    @staticmethod
    def _to_params(employee: Employee) -> tuple:
        return (
            employee.code,
            employee.name,
            employee.password,
            _flag_to_column(employee.admin_flag, StoredRole, "admin_flag"),
            _ts_to_column(employee.created_at),
            _ts_to_column(employee.updated_at),
            _flag_to_column(employee.delete_flag, StoredDeleteFlag, "delete_flag"),
        )

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Employee:
        return Employee(
            id=row["id"],
            code=row["code"],
            name=row["name"],
            password=row["password"],
            admin_flag=_column_to_flag(row["admin_flag"], StoredRole, "admin_flag"),
            created_at=_column_to_ts(row["created_at"]),
            updated_at=_column_to_ts(row["updated_at"]),
            delete_flag=_column_to_flag(row["delete_flag"], StoredDeleteFlag, "delete_flag"),
        )
