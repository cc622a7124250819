"""
Разрешение точечных путей свойств относительно корневого объекта.

Путь вида "person.address.city" разбивается по точкам; каждый сегмент
разрешается на текущем значении:
- None прерывает разрешение, результат None;
- мапа: значение по ключу (отсутствие ключа даёт None, а не ошибку);
- объект с методом read_property(name): результат этого метода;
- иначе аксессоры get_name()/getName(), для булевых is_name()/isName(),
  затем обычный атрибут или property.

Путь "." обозначает сам корень.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Protocol, runtime_checkable

from .errors import PropertyResolutionError

PROPERTY_DELIM = "."
SELF_PATH = "."


@runtime_checkable
class PropertyReader(Protocol):
    """
    Возможность «прочитать именованное свойство».

    Объекты данных могут реализовать её, чтобы управлять разрешением путей
    без поиска аксессоров. Отсутствующее свойство сигнализируется
    KeyError или AttributeError; любое исключение из read_property
    приводит к PropertyResolutionError.
    """

    def read_property(self, name: str) -> Any:
        ...


def split_path(path: str) -> List[str]:
    """
    Разбивает путь свойства на сегменты.

    Returns:
        Список сегментов; пустой список для пути "." (сам корень)

    Raises:
        ValueError: Если путь пуст или содержит пустой сегмент
    """
    path = path.strip()
    if path == SELF_PATH:
        return []
    if not path:
        raise ValueError("empty property path")

    segments = [segment.strip() for segment in path.split(PROPERTY_DELIM)]
    if any(not segment for segment in segments):
        raise ValueError(f"empty segment in property path '{path}'")
    return segments


def _accessor_names(segment: str) -> List[str]:
    """Имена методов-аксессоров в порядке приоритета."""
    capitalized = segment[0].upper() + segment[1:]
    return [f"get_{segment}", f"get{capitalized}", f"is_{segment}", f"is{capitalized}"]


def _find_accessor(obj: Any, segment: str) -> Optional[Callable[[], Any]]:
    for name in _accessor_names(segment):
        accessor = getattr(obj, name, None)
        if callable(accessor):
            return accessor
    return None


class PropertyResolver:
    """
    Разрешает точечные пути свойств.

    Не кэширует ничего между вызовами: каждый вызов заново обходит объекты.
    """

    def resolve(self, root: Any, path: str) -> Any:
        """
        Разрешает путь относительно корня.

        Args:
            root: Объект, от которого начинается разрешение
            path: Точечный путь ("a.b.c") или "." для самого корня

        Returns:
            Значение свойства или None, если какое-то промежуточное значение None

        Raises:
            PropertyResolutionError: Если сегмент не удалось разрешить
            ValueError: Если путь синтаксически некорректен
        """
        value = root
        for segment in split_path(path):
            if value is None:
                break
            value = self.read_segment(value, segment)
        return value

    def read_segment(self, obj: Any, segment: str) -> Any:
        """
        Читает один сегмент пути с объекта.

        Мапы дают None для отсутствующих ключей; для структурированных
        объектов отсутствие свойства - ошибка.
        """
        if isinstance(obj, Mapping):
            return obj.get(segment)

        if isinstance(obj, PropertyReader):
            try:
                return obj.read_property(segment)
            except Exception as e:
                raise PropertyResolutionError(segment, e, type(obj)) from e

        accessor = _find_accessor(obj, segment)
        try:
            if accessor is not None:
                return accessor()
            # Обычный атрибут или property; ошибка внутри property тоже сюда
            return getattr(obj, segment)
        except Exception as e:
            raise PropertyResolutionError(segment, e, type(obj)) from e


_default_resolver = PropertyResolver()


def resolve_property(root: Any, path: str) -> Any:
    """Удобная функция: разрешает путь резолвером по умолчанию."""
    return _default_resolver.resolve(root, path)


__all__ = [
    "PropertyReader",
    "PropertyResolver",
    "resolve_property",
    "split_path",
    "PROPERTY_DELIM",
    "SELF_PATH",
]
