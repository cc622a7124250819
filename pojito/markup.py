"""
Работа с разметкой: загрузка шаблона и сериализация результата (lxml).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from lxml import etree

from .errors import TemplateLoadError
from .types import ConvertOptions

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # Сущности не раскрываются, сетевой доступ запрещён
    return etree.XMLParser(resolve_entities=False, no_network=True)


def load_template(location: Union[str, Path]) -> etree._Element:
    """
    Читает шаблон из файла и возвращает корневой элемент.

    Raises:
        TemplateLoadError: Файл недоступен или разметка некорректна
    """
    path = Path(location)
    try:
        tree = etree.parse(str(path), _make_parser())
    except (OSError, etree.XMLSyntaxError) as e:
        raise TemplateLoadError(str(path), e) from e

    logger.debug(f"Loaded template {path}")
    return tree.getroot()


def parse_template_text(text: Union[str, bytes], location: str = "<string>") -> etree._Element:
    """Разбирает шаблон из текста."""
    if isinstance(text, str):
        # lxml не принимает str с объявлением кодировки
        text = text.encode("utf-8")
    try:
        return etree.fromstring(text, _make_parser())
    except etree.XMLSyntaxError as e:
        raise TemplateLoadError(location, e) from e


def element_children(node: etree._Element) -> Iterator[etree._Element]:
    """Дочерние элементы узла (комментарии и инструкции пропускаются)."""
    return node.iterchildren(etree.Element)


def element_text(node: etree._Element) -> str:
    """Непосредственный текст узла (без текста потомков), обрезанный."""
    chunks = [node.text or ""]
    chunks.extend(child.tail or "" for child in node)
    return "".join(chunks).strip()


def local_name(name: str) -> str:
    """Локальное имя атрибута или элемента без пространства имён."""
    return etree.QName(name).localname


def serialize(root: etree._Element, options: Optional[ConvertOptions] = None) -> str:
    """
    Сериализует дерево в строку.

    При pretty_print дерево форматируется отступами options.indent.
    """
    opts = options or ConvertOptions()
    if opts.pretty_print:
        etree.indent(root, space=opts.indent)

    data = etree.tostring(
        root,
        encoding=opts.encoding,
        xml_declaration=opts.xml_declaration,
        pretty_print=opts.pretty_print,
    )
    return data.decode(opts.encoding)


__all__ = [
    "load_template",
    "parse_template_text",
    "element_children",
    "element_text",
    "local_name",
    "serialize",
]
