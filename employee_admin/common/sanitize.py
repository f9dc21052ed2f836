def maskSecret(value: str | None) -> str | None:
    """
    Назначение:
        Маскирует пароль сотрудника для вывода в stdout/logs.

    Выходные данные:
        str | None
            '***', если value задано, иначе None.
    """
    if value is None:
        return None
    return "***"
