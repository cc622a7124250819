"""
Язык выражений ${путь;действие=параметр}.
"""

from __future__ import annotations

from .evaluator import ExpressionEvaluator
from .model import ActionCall, Expression
from .parser import ExpressionParser, contains_expression

__all__ = [
    "ActionCall",
    "Expression",
    "ExpressionParser",
    "ExpressionEvaluator",
    "contains_expression",
]
