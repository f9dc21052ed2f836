from __future__ import annotations

from datetime import datetime


def getNow() -> datetime:
    """
    Назначение:
        Текущее локальное время с timezone (для created_at/updated_at).
    """
    return datetime.now().astimezone()


def getDurationMs(startMonotonic: float, endMonotonic: float) -> int:
    """
    Назначение:
        Считает длительность в миллисекундах по monotonic timestamps.
    """
    return int((endMonotonic - startMonotonic) * 1000)
