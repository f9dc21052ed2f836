from __future__ import annotations


class CsvFormatError(Exception):
    """
    Назначение:
        Ошибка критического формата CSV (количество колонок, нечисловые id/флаги).
    """


def parseNull(value: str | None) -> str | None:
    """
    Назначение:
        Преобразует пустые/NULL значения в None и тримит строки.
    """
    if value is None:
        return None
    trimmed = value.strip()
    if trimmed == "" or trimmed.lower() == "null":
        return None
    return trimmed


def parseOptionalInt(value: str | None, column: str, line_no: int) -> int | None:
    """
    Назначение:
        Разбор необязательного целого поля CSV.

    Поведение:
        - None -> None.
        - Нечисловое значение -> CsvFormatError с номером строки.
    """
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise CsvFormatError(f"Invalid integer in column '{column}' at line {line_no}: {value!r}") from exc
