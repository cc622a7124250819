"""
Парсер выражений.

Грамматика (разделители не экранируются):
text       → literal | literal? "${" body "}" literal?
body       → path (";" action)*
path       → "." | IDENTIFIER ("." IDENTIFIER)*
action     → NAME "=" PARAM

Распознаётся только первый фрагмент ${...}; текст вокруг него отбрасывается.
"""

from __future__ import annotations

from typing import List, Optional

from .model import ActionCall, Expression
from ..errors import ExpressionParseError
from ..properties import split_path

START_DELIM = "${"
END_DELIM = "}"
PARTS_DELIM = ";"
ACTION_DELIM = "="


class ExpressionParser:
    """Разбирает текст атрибута или элемента в Expression."""

    def parse(self, text: str) -> Optional[Expression]:
        """
        Ищет и разбирает первое выражение в тексте.

        Args:
            text: Сырое значение атрибута или текст элемента

        Returns:
            Expression или None, если текст - литерал без "${"

        Raises:
            ExpressionParseError: Если выражение синтаксически некорректно
        """
        stripped = text.strip()
        start = stripped.find(START_DELIM)
        if start < 0:
            return None

        body_start = start + len(START_DELIM)
        end = stripped.find(END_DELIM, body_start)
        if end < 0:
            raise ExpressionParseError(text, start, f"missing closing '{END_DELIM}'")

        body = stripped[body_start:end]
        parts = body.split(PARTS_DELIM)

        path = parts[0].strip()
        try:
            split_path(path)
        except ValueError as e:
            raise ExpressionParseError(text, body_start, str(e)) from e

        actions: List[ActionCall] = []
        offset = body_start + len(parts[0]) + len(PARTS_DELIM)
        for raw_part in parts[1:]:
            actions.append(self._parse_action(text, raw_part, offset))
            offset += len(raw_part) + len(PARTS_DELIM)

        return Expression(
            source=text,
            path=path,
            actions=tuple(actions),
            span=(start, end + len(END_DELIM)),
        )

    def _parse_action(self, text: str, raw_part: str, position: int) -> ActionCall:
        part = raw_part.strip()
        if ACTION_DELIM not in part:
            raise ExpressionParseError(
                text, position, f"action '{part}' must have the form name{ACTION_DELIM}param"
            )

        name, param = part.split(ACTION_DELIM, 1)
        name = name.strip()
        if not name:
            raise ExpressionParseError(text, position, "action name cannot be empty")

        return ActionCall(name=name, param=param)


def contains_expression(text: Optional[str]) -> bool:
    """Быстрая проверка: есть ли в тексте начало выражения."""
    return bool(text) and START_DELIM in text


__all__ = ["ExpressionParser", "contains_expression", "START_DELIM", "END_DELIM"]
