"""
Иерархия ошибок конвертера.

Все ожидаемые ошибки, которые должны показываться пользователю
чистым сообщением (без трассировки), наследуются от PojitoUserError.

Ошибки программирования НЕ наследуются от PojitoUserError:
они распространяются с полной трассировкой.
"""

from __future__ import annotations

from typing import Optional


class PojitoUserError(Exception):
    """
    Базовый класс всех пользовательских ошибок конвертера.

    Сигнализирует о проблемах, которые может исправить пользователь:
    некорректный шаблон, недоступное свойство, неизвестный предикат и т.п.
    """
    pass


class TemplateLoadError(PojitoUserError):
    """Шаблон не найден, не читается или не является корректной разметкой."""

    def __init__(self, location: str, cause: Optional[BaseException] = None):
        self.location = location
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to load template '{location}'{detail}")


class DataLoadError(PojitoUserError):
    """Файл с данными не читается или не содержит мапу на верхнем уровне."""

    def __init__(self, location: str, cause: Optional[BaseException] = None, message: str = ""):
        self.location = location
        self.cause = cause
        detail = message or (str(cause) if cause is not None else "unknown error")
        super().__init__(f"Failed to load data file '{location}': {detail}")


class PropertyResolutionError(PojitoUserError):
    """
    Сегмент пути не удалось разрешить на текущем значении.

    Attributes:
        segment: Имя сегмента, на котором произошла ошибка
        cause: Исходное исключение (отсутствующий аксессор или ошибка внутри него)
    """

    def __init__(self, segment: str, cause: Optional[BaseException] = None, owner: Optional[type] = None):
        self.segment = segment
        self.cause = cause
        self.owner = owner
        where = f" of {owner.__name__}" if owner is not None else ""
        reason = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot resolve property '{segment}'{where}{reason}")


class UnknownExtensionError(PojitoUserError):
    """Запрошен предикат или действие, которые не зарегистрированы."""

    kind = "extension"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown {self.kind} '{name}'")


class UnknownPredicateError(UnknownExtensionError):
    kind = "predicate"


class UnknownActionError(UnknownExtensionError):
    kind = "action"


class ExpressionParseError(PojitoUserError):
    """Синтаксически некорректное выражение ${...}."""

    def __init__(self, expression: str, position: int, message: str):
        self.expression = expression
        self.position = position
        self.message = message
        super().__init__(f"Malformed expression '{expression}' at position {position}: {message}")


class ExtensionValueError(PojitoUserError):
    """Встроенный предикат или действие получили значение вне своего контракта."""

    def __init__(self, kind: str, name: str, message: str):
        self.kind = kind
        self.name = name
        self.message = message
        super().__init__(f"{kind.capitalize()} '{name}': {message}")


class TemplateDiscardedError(PojitoUserError):
    """Корневой элемент шаблона отброшен предикатом - выводить нечего."""

    def __init__(self, root_name: str):
        self.root_name = root_name
        super().__init__(f"Template root <{root_name}> was discarded by a predicate")


__all__ = [
    "PojitoUserError",
    "TemplateLoadError",
    "DataLoadError",
    "PropertyResolutionError",
    "UnknownExtensionError",
    "UnknownPredicateError",
    "UnknownActionError",
    "ExpressionParseError",
    "ExtensionValueError",
    "TemplateDiscardedError",
]
