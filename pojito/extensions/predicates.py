"""
Встроенные предикаты.

- ifNotNull: истинно, если значение не None
- ifNotEmpty: истинно, если значение - непустая коллекция
"""

from __future__ import annotations

from typing import Any, Dict

from .base import Predicate
from ..errors import ExtensionValueError
from ..utils import is_collection


class NotNullPredicate(Predicate):
    """Истинно, если значение не None."""

    def evaluate(self, value: Any) -> bool:
        return value is not None


class NotEmptyCollectionPredicate(Predicate):
    """
    Истинно, если значение - коллекция хотя бы с одним элементом.

    None считается пустой коллекцией. Скаляры не входят в контракт
    предиката и приводят к ошибке.
    """

    name = "ifNotEmpty"

    def evaluate(self, value: Any) -> bool:
        if value is None:
            return False
        if not is_collection(value):
            raise ExtensionValueError(
                "predicate", self.name,
                f"expected a collection, got {type(value).__name__}",
            )
        return len(value) > 0


def builtin_predicates() -> Dict[str, Predicate]:
    """Свежий набор встроенных предикатов."""
    return {
        "ifNotNull": NotNullPredicate(),
        "ifNotEmpty": NotEmptyCollectionPredicate(),
    }


__all__ = ["NotNullPredicate", "NotEmptyCollectionPredicate", "builtin_predicates"]
