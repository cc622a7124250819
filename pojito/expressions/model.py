"""
Модель выражений ${путь;действие=параметр;...}.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ActionCall:
    """Вызов действия: имя и сырая строка параметра."""
    name: str
    param: str

    def __str__(self) -> str:
        return f"{self.name}={self.param}"


@dataclass(frozen=True)
class Expression:
    """
    Разобранное выражение.

    Attributes:
        source: Исходный текст, в котором найдено выражение
        path: Точечный путь свойства ("." - текущий корень)
        actions: Цепочка действий в порядке применения
        span: Границы первого ${...} в обрезанном тексте (начало, конец)
    """
    source: str
    path: str
    actions: Tuple[ActionCall, ...] = field(default_factory=tuple)
    span: Tuple[int, int] = (0, 0)

    def __str__(self) -> str:
        parts = [self.path, *(str(action) for action in self.actions)]
        return "${" + ";".join(parts) + "}"


__all__ = ["ActionCall", "Expression"]
