from __future__ import annotations

import csv
from typing import Iterator

from employee_admin.domain.models import EmployeeView
from employee_admin.infra.sources.csv_utils import CsvFormatError, parseNull, parseOptionalInt

SOURCE_COLUMNS: tuple[str, ...] = ("id", "code", "name", "password", "admin_flag", "delete_flag")


class EmployeeCsvSource:
    """
    Назначение/ответственность:
        Читает CSV сотрудников и отдаёт (line_no, EmployeeView).

    Контракт:
        - С заголовком: колонки по именам, отсутствующие колонки -> None,
          лишние колонки -> CsvFormatError.
        - Без заголовка: колонки в порядке SOURCE_COLUMNS.
        - Пустое значение или "null" -> None.
    """

    def __init__(self, path: str, has_header: bool) -> None:
        self.path = path
        self.has_header = has_header

    def __iter__(self) -> Iterator[tuple[int, EmployeeView]]:
        with open(self.path, "r", encoding="utf-8-sig", newline="") as f:
            if self.has_header:
                reader = csv.DictReader(f, delimiter=",")
                if reader.fieldnames is None:
                    raise CsvFormatError("Missing header in employees CSV")
                unknown = [name for name in reader.fieldnames if name not in SOURCE_COLUMNS]
                if unknown:
                    raise CsvFormatError(f"Unknown columns in header: {', '.join(unknown)}")
                for csv_line_no, row in enumerate(reader, start=2):
                    if not row:
                        continue
                    if None in row:
                        extra = row.get(None) or []
                        got = len(reader.fieldnames) + len(extra)
                        raise CsvFormatError(
                            f"Invalid column count at line {csv_line_no}: expected {len(reader.fieldnames)}, got {got}"
                        )
                    values = {key: parseNull(row.get(key)) for key in SOURCE_COLUMNS}
                    yield csv_line_no, _to_view(values, csv_line_no)
                return

            reader = csv.reader(f, delimiter=",")
            for csv_line_no, row in enumerate(reader, start=1):
                if not row:
                    continue
                if len(row) != len(SOURCE_COLUMNS):
                    raise CsvFormatError(
                        f"Invalid column count at line {csv_line_no}: expected {len(SOURCE_COLUMNS)}, got {len(row)}"
                    )
                values = {key: parseNull(value) for key, value in zip(SOURCE_COLUMNS, row)}
                yield csv_line_no, _to_view(values, csv_line_no)


def _to_view(values: dict[str, str | None], line_no: int) -> EmployeeView:
    return EmployeeView(
        id=parseOptionalInt(values.get("id"), "id", line_no),
        code=values.get("code"),
        name=values.get("name"),
        password=values.get("password"),
        admin_flag=parseOptionalInt(values.get("admin_flag"), "admin_flag", line_no),
        delete_flag=parseOptionalInt(values.get("delete_flag"), "delete_flag", line_no),
    )
