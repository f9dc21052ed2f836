from __future__ import annotations

from pathlib import Path

import yaml

from employee_admin.domain.messages import DEFAULT_CATALOG, MessageCatalog
from employee_admin.errors import AppError


def load_message_catalog(path: str | None) -> MessageCatalog:
    """
    Назначение:
        Загрузить справочник сообщений из YAML (ключ -> текст) поверх умолчаний.

    Поведение:
        - path=None -> DEFAULT_CATALOG.
        - Нет файла, не словарь, неизвестный ключ -> AppError(category="config").
    """
    if not path:
        return DEFAULT_CATALOG

    p = Path(path)
    if not p.exists() or not p.is_file():
        raise AppError(category="config", code="MESSAGES_FILE_NOT_FOUND", message=f"messages file not found: {path}")

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise AppError(category="config", code="MESSAGES_FILE_INVALID", message=f"messages file is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise AppError(category="config", code="MESSAGES_FILE_INVALID", message="messages file must be a mapping")

    try:
        return MessageCatalog(data)
    except ValueError as exc:
        raise AppError(category="config", code="MESSAGES_FILE_INVALID", message=str(exc)) from exc
