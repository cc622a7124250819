from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any


def is_collection(value: Any) -> bool:
    """
    Коллекция для целей развёртывания: конечный итерируемый контейнер,
    но не строка, не байты и не мапа.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Collection)


__all__ = ["is_collection"]
