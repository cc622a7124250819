"""
Вычислитель выражений.

Разрешает путь свойства относительно текущего корня контекста конвертации
и пропускает результат через цепочку действий слева направо.
"""

from __future__ import annotations

from typing import Any, Optional

from .model import Expression
from .parser import ExpressionParser
from ..context import ConversionContext
from ..extensions.registry import ActionRegistry
from ..properties import PropertyResolver


class ExpressionEvaluator:
    """
    Вычисляет тексты с выражениями ${...}.

    Литералы (текст без "${") возвращаются без изменений.
    """

    def __init__(
        self,
        actions: Optional[ActionRegistry] = None,
        resolver: Optional[PropertyResolver] = None,
        parser: Optional[ExpressionParser] = None,
    ):
        self.actions = actions if actions is not None else ActionRegistry()
        self.resolver = resolver if resolver is not None else PropertyResolver()
        self.parser = parser if parser is not None else ExpressionParser()

    def evaluate(self, raw_text: str, context: ConversionContext) -> Any:
        """
        Вычисляет текст в контексте.

        Args:
            raw_text: Значение атрибута или обрезанный текст элемента
            context: Контекст с текущим корнем вычисления

        Returns:
            Исходный текст для литерала, иначе значение выражения (возможно None)

        Raises:
            ExpressionParseError: Некорректное выражение
            PropertyResolutionError: Сегмент пути не разрешается
            UnknownActionError: Неизвестное действие в цепочке
        """
        expression = self.parser.parse(raw_text)
        if expression is None:
            return raw_text
        return self.evaluate_expression(expression, context)

    def evaluate_expression(self, expression: Expression, context: ConversionContext) -> Any:
        """Вычисляет уже разобранное выражение."""
        value = self.resolver.resolve(context.root, expression.path)

        for call in expression.actions:
            value = self.actions.execute(call.name, call.param, value)

        return value


__all__ = ["ExpressionEvaluator"]
