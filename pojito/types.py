from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConvertOptions:
    """
    Настройки сериализации результата конвертации.

    По умолчанию соответствуют «красивому» формату: отступ в два пробела,
    XML-декларация с кодировкой UTF-8.
    """
    pretty_print: bool = True
    indent: str = "  "
    encoding: str = "UTF-8"
    xml_declaration: bool = True


__all__ = ["ConvertOptions"]
