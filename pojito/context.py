"""
Контекст конвертации.

Хранит корень вычисления выражений. Вне развёртывания коллекций корнем
служат данные конвертации; при развёртывании - текущий элемент коллекции.
Вложенные развёртывания образуют стек: выход из внутреннего восстанавливает
элемент внешнего, а не данные.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional


class ConversionContext:
    """
    Стек корней вычисления для одной конвертации.

    Создаётся заново на каждую конвертацию и передаётся явным параметром
    по всему рекурсивному обходу, поэтому конвертации не делят состояние.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self.data: Mapping[str, Any] = data if data is not None else {}
        self._stack: List[Any] = []

    @property
    def root(self) -> Any:
        """Объект, относительно которого разрешаются пути."""
        if self._stack:
            return self._stack[-1]
        return self.data

    @property
    def depth(self) -> int:
        """Глубина вложенности развёртываний (0 - вне коллекций)."""
        return len(self._stack)

    @property
    def in_collection(self) -> bool:
        return bool(self._stack)

    def push(self, element: Any) -> None:
        self._stack.append(element)

    def pop(self) -> Any:
        if not self._stack:
            raise RuntimeError("No collection element to pop (context stack is empty)")
        return self._stack.pop()

    @contextmanager
    def element(self, element: Any) -> Iterator[ConversionContext]:
        """
        Делает элемент коллекции корнем на время блока.

        Example:
            with context.element(item):
                transformer.transform(child, context)
        """
        self.push(element)
        try:
            yield self
        finally:
            self.pop()


__all__ = ["ConversionContext"]
