from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class MessageKey(str, Enum):
    """
    Назначение:
        Стабильные ключи сообщений об ошибках.
    """

    E_NOEMP_CODE = "E_NOEMP_CODE"
    E_EMP_CODE_EXIST = "E_EMP_CODE_EXIST"
    E_NONAME = "E_NONAME"
    E_NOPASSWORD = "E_NOPASSWORD"
    E_EMP_NOT_FOUND = "E_EMP_NOT_FOUND"


DEFAULT_MESSAGES: Mapping[MessageKey, str] = MappingProxyType(
    {
        MessageKey.E_NOEMP_CODE: "missing code",
        MessageKey.E_EMP_CODE_EXIST: "code already exists",
        MessageKey.E_NONAME: "missing name",
        MessageKey.E_NOPASSWORD: "missing password",
        MessageKey.E_EMP_NOT_FOUND: "employee not found",
    }
)


class MessageCatalog:
    """
    Назначение/ответственность:
        Read-only справочник сообщений по ключу.

    Инварианты:
        - Содержит текст для каждого MessageKey.
        - После создания не изменяется.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        messages = dict(DEFAULT_MESSAGES)
        for raw_key, text in (overrides or {}).items():
            try:
                key = MessageKey(raw_key)
            except ValueError as exc:
                raise ValueError(f"Unknown message key: {raw_key}") from exc
            if not isinstance(text, str) or text.strip() == "":
                raise ValueError(f"Message for {raw_key} must be a non-empty string")
            messages[key] = text
        self._messages: Mapping[MessageKey, str] = MappingProxyType(messages)

    def get(self, key: MessageKey) -> str:
        return self._messages[key]

    def as_dict(self) -> dict[str, str]:
        return {key.value: text for key, text in self._messages.items()}


DEFAULT_CATALOG = MessageCatalog()


__all__ = ["MessageKey", "MessageCatalog", "DEFAULT_MESSAGES", "DEFAULT_CATALOG"]
