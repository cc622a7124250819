"""
Загрузка контекста данных из файла.

YAML (и JSON как его подмножество) читается безопасным загрузчиком ruamel.
Верхний уровень обязан быть мапой: ключи становятся корневыми именами
для выражений ${key.property}.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import DataLoadError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def load_data_text(text: str, location: str = "<string>") -> Dict[str, Any]:
    """
    Разбирает текст YAML в контекст данных.

    Args:
        text: Содержимое YAML/JSON
        location: Имя источника для сообщений об ошибках

    Returns:
        Словарь с данными (пустой документ даёт пустой словарь)

    Raises:
        DataLoadError: При синтаксической ошибке или если верхний уровень не мапа
    """
    try:
        data = _yaml.load(text)
    except YAMLError as e:
        raise DataLoadError(location, e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataLoadError(
            location,
            message=f"top level must be a mapping, got {type(data).__name__}",
        )
    return data


def load_data_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Читает файл с данными и разбирает его через load_data_text."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise DataLoadError(str(p), e) from e

    logger.debug(f"Loaded data file {p}")
    return load_data_text(text, str(p))


__all__ = ["load_data_text", "load_data_file"]
