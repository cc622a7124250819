"""
Реестры предикатов и действий.

Встроенные записи создаются один раз при импорте модуля. Пользовательские
регистрации хранятся отдельно в каждом экземпляре реестра и затеняют
встроенные с тем же именем. Поиск: сначала пользовательские, затем
встроенные; неизвестное имя - фатальная ошибка конфигурации.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from .actions import builtin_actions
from .base import Action, ActionLike, Predicate, PredicateLike, as_action, as_predicate
from .predicates import builtin_predicates
from ..errors import UnknownActionError, UnknownExtensionError, UnknownPredicateError

logger = logging.getLogger(__name__)

T = TypeVar("T")

BUILTIN_PREDICATES: Mapping[str, Predicate] = builtin_predicates()
BUILTIN_ACTIONS: Mapping[str, Action] = builtin_actions()


class ExtensionRegistry(Generic[T]):
    """
    Упорядоченный поиск именованных расширений.

    Подклассы задают вид расширения, встроенный набор, функцию приведения
    и класс ошибки для неизвестного имени.
    """

    kind: str = "extension"
    not_found_error: Type[UnknownExtensionError] = UnknownExtensionError

    def __init__(self, builtins: Mapping[str, T], coerce: Callable[[Any], T]):
        self._builtins: Mapping[str, T] = builtins
        self._user: Dict[str, T] = {}
        self._coerce = coerce

    def register(self, name: str, extension: Any) -> None:
        """
        Регистрирует пользовательское расширение.

        Последняя регистрация с тем же именем побеждает.
        """
        if not name or not name.strip():
            raise ValueError(f"{self.kind} name cannot be empty")

        if name in self._user:
            logger.warning(f"User {self.kind} '{name}' overwrites existing registration")
        elif name in self._builtins:
            logger.debug(f"User {self.kind} '{name}' shadows built-in")

        self._user[name] = self._coerce(extension)

    def update(self, extensions: Mapping[str, Any]) -> None:
        """Регистрирует набор расширений (аналог dict.update)."""
        for name, extension in extensions.items():
            self.register(name, extension)

    def is_registered(self, name: str) -> bool:
        return name in self._user or name in self._builtins

    def find(self, name: str) -> Optional[T]:
        """Возвращает расширение или None, если имя неизвестно."""
        if name in self._user:
            return self._user[name]
        return self._builtins.get(name)

    def get(self, name: str) -> T:
        """
        Возвращает расширение по имени.

        Raises:
            UnknownExtensionError: Если имя не зарегистрировано
        """
        extension = self.find(name)
        if extension is None:
            raise self.not_found_error(name)
        return extension

    def names(self) -> List[str]:
        return sorted(set(self._builtins) | set(self._user))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)


class PredicateRegistry(ExtensionRegistry[Predicate]):
    """Реестр предикатов: пользовательские поверх встроенных."""

    kind = "predicate"
    not_found_error = UnknownPredicateError

    def __init__(self, builtins: Optional[Mapping[str, Predicate]] = None):
        super().__init__(BUILTIN_PREDICATES if builtins is None else builtins, as_predicate)

    def register(self, name: str, extension: PredicateLike) -> None:
        super().register(name, extension)

    def evaluate(self, name: str, value: Any) -> bool:
        return bool(self.get(name).evaluate(value))


class ActionRegistry(ExtensionRegistry[Action]):
    """Реестр действий: пользовательские поверх встроенных."""

    kind = "action"
    not_found_error = UnknownActionError

    def __init__(self, builtins: Optional[Mapping[str, Action]] = None):
        super().__init__(BUILTIN_ACTIONS if builtins is None else builtins, as_action)

    def register(self, name: str, extension: ActionLike) -> None:
        super().register(name, extension)

    def execute(self, name: str, param: str, value: Any) -> Any:
        return self.get(name).execute(param, value)


__all__ = [
    "ExtensionRegistry",
    "PredicateRegistry",
    "ActionRegistry",
    "BUILTIN_PREDICATES",
    "BUILTIN_ACTIONS",
]
