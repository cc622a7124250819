"""
Встроенные действия.

transform=<имя> применяет к значению именованное строковое преобразование.
Это точка расширения: пользователь может зарегистрировать собственное
действие "transform", и оно заменит встроенное.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from .base import Action
from ..errors import ExtensionValueError

TRANSFORMS: Dict[str, Callable[[Any], Any]] = {
    "upper": lambda v: str(v).upper(),
    "lower": lambda v: str(v).lower(),
    "capitalize": lambda v: str(v).capitalize(),
    "title": lambda v: str(v).title(),
    "strip": lambda v: str(v).strip(),
    "str": str,
    "length": len,
}


class TransformAction(Action):
    """Именованное преобразование значения; None проходит без изменений."""

    name = "transform"

    def execute(self, param: str, value: Any) -> Any:
        key = param.strip()
        func = TRANSFORMS.get(key)
        if func is None:
            available = ", ".join(sorted(TRANSFORMS))
            raise ExtensionValueError(
                "action", self.name,
                f"unknown transform '{key}'. Available: {available}",
            )
        if value is None:
            return None
        try:
            return func(value)
        except TypeError as e:
            raise ExtensionValueError("action", self.name, f"cannot apply '{key}': {e}") from e


def builtin_actions() -> Dict[str, Action]:
    """Свежий набор встроенных действий."""
    return {
        "transform": TransformAction(),
    }


__all__ = ["TransformAction", "TRANSFORMS", "builtin_actions"]
