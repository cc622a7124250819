"""
Расширения конвертера: предикаты, фильтрующие узлы, и действия,
преобразующие значения выражений.
"""

from __future__ import annotations

from .actions import TransformAction
from .base import Action, FunctionAction, FunctionPredicate, Predicate, as_action, as_predicate
from .predicates import NotEmptyCollectionPredicate, NotNullPredicate
from .registry import ActionRegistry, ExtensionRegistry, PredicateRegistry

__all__ = [
    "Predicate",
    "Action",
    "FunctionPredicate",
    "FunctionAction",
    "as_predicate",
    "as_action",
    "NotNullPredicate",
    "NotEmptyCollectionPredicate",
    "TransformAction",
    "ExtensionRegistry",
    "PredicateRegistry",
    "ActionRegistry",
]
