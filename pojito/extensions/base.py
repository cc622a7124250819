"""
Базовые интерфейсы расширений: предикаты и действия.

Предикат - чистая функция (value) -> bool, решающая, попадает ли узел в вывод.
Действие - чистая функция (param, value) -> value, преобразующая значение
выражения. Обычные функции оборачиваются в адаптеры при регистрации.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union


class Predicate(ABC):
    """Именованное булево условие над разрешённым значением."""

    @abstractmethod
    def evaluate(self, value: Any) -> bool:
        """
        Вычисляет предикат.

        Args:
            value: Результат вычисления выражения атрибута

        Returns:
            False, если узел должен быть отброшен вместе с поддеревом
        """
        pass


class Action(ABC):
    """Именованное унарное преобразование значения с текстовым параметром."""

    @abstractmethod
    def execute(self, param: str, value: Any) -> Any:
        """
        Выполняет действие.

        Args:
            param: Сырая строка параметра из выражения (разбор - забота действия)
            value: Текущее значение цепочки

        Returns:
            Следующее значение цепочки
        """
        pass


class FunctionPredicate(Predicate):
    """Адаптер обычной функции к интерфейсу Predicate."""

    def __init__(self, func: Callable[[Any], bool]):
        self.func = func

    def evaluate(self, value: Any) -> bool:
        return bool(self.func(value))

    def __repr__(self) -> str:
        return f"FunctionPredicate({getattr(self.func, '__name__', self.func)!r})"


class FunctionAction(Action):
    """Адаптер обычной функции к интерфейсу Action."""

    def __init__(self, func: Callable[[str, Any], Any]):
        self.func = func

    def execute(self, param: str, value: Any) -> Any:
        return self.func(param, value)

    def __repr__(self) -> str:
        return f"FunctionAction({getattr(self.func, '__name__', self.func)!r})"


PredicateLike = Union[Predicate, Callable[[Any], bool]]
ActionLike = Union[Action, Callable[[str, Any], Any]]


def as_predicate(obj: PredicateLike) -> Predicate:
    """Приводит предикат или функцию к Predicate."""
    if isinstance(obj, Predicate):
        return obj
    if callable(obj):
        return FunctionPredicate(obj)
    raise TypeError(f"Predicate must be a Predicate or a callable, got {type(obj).__name__}")


def as_action(obj: ActionLike) -> Action:
    """Приводит действие или функцию к Action."""
    if isinstance(obj, Action):
        return obj
    if callable(obj):
        return FunctionAction(obj)
    raise TypeError(f"Action must be an Action or a callable, got {type(obj).__name__}")


__all__ = [
    "Predicate",
    "Action",
    "FunctionPredicate",
    "FunctionAction",
    "PredicateLike",
    "ActionLike",
    "as_predicate",
    "as_action",
]
