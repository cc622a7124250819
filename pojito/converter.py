"""
Публичная точка входа: конвертация данных в XML по шаблону.

Пример:
    converter = PojitoConverter("person.xml")
    converter.set_data({"person": person})
    converter.add_predicates({"ifAdult": lambda p: p.age >= 18})
    xml = converter.convert()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from lxml import etree

from .context import ConversionContext
from .data import load_data_file
from .errors import TemplateDiscardedError
from .expressions.evaluator import ExpressionEvaluator
from .extensions.base import ActionLike, PredicateLike
from .extensions.registry import ActionRegistry, PredicateRegistry
from .markup import load_template, parse_template_text, serialize
from .properties import PropertyResolver
from .transformer import TreeTransformer
from .types import ConvertOptions

logger = logging.getLogger(__name__)

TemplateSource = Union[str, Path, etree._Element]


class PojitoConverter:
    """
    Конвертер объектов в XML по шаблону.

    Экземпляр хранит только конфигурацию (шаблон, данные, расширения);
    состояние конвертации создаётся заново при каждом вызове convert(),
    поэтому повторные и вложенные вызовы не мешают друг другу.
    """

    def __init__(self, template: TemplateSource, options: Optional[ConvertOptions] = None):
        """
        Args:
            template: Путь к файлу шаблона или уже разобранный корневой элемент
            options: Настройки сериализации
        """
        self.template = template
        self.options = options or ConvertOptions()
        self.data: Dict[str, Any] = {}

        self.predicates = PredicateRegistry()
        self.actions = ActionRegistry()
        self.resolver = PropertyResolver()

    @classmethod
    def from_text(cls, text: str, options: Optional[ConvertOptions] = None) -> PojitoConverter:
        """Создаёт конвертер из текста шаблона."""
        return cls(parse_template_text(text), options)

    @classmethod
    def from_element(cls, root: etree._Element, options: Optional[ConvertOptions] = None) -> PojitoConverter:
        return cls(root, options)

    # ----------------------------- configuration ----------------------------- #

    def set_data(self, data: Mapping[str, Any]) -> None:
        self.data = dict(data)

    def set_data_file(self, path: Union[str, Path]) -> None:
        """Загружает данные из YAML/JSON файла."""
        self.data = load_data_file(path)

    def add_predicates(self, predicates: Mapping[str, PredicateLike]) -> None:
        """
        Добавляет предикаты для фильтрации узлов.

        Предикат с именем встроенного заменяет встроенный.
        """
        self.predicates.update(predicates)

    def add_actions(self, actions: Mapping[str, ActionLike]) -> None:
        """Добавляет действия; одноимённые встроенные заменяются."""
        self.actions.update(actions)

    # -------------------------------- service -------------------------------- #

    def convert(self) -> str:
        """
        Строит XML по шаблону и текущим данным.

        Returns:
            Сериализованный документ

        Raises:
            TemplateLoadError: Шаблон недоступен или некорректен
            TemplateDiscardedError: Корень шаблона отброшен предикатом
            PojitoUserError: Любая другая ошибка вычисления (без частичного вывода)
        """
        output = self.convert_tree()
        return serialize(output, self.options)

    def convert_tree(self) -> etree._Element:
        """Как convert(), но возвращает выходное дерево без сериализации."""
        template_root = self._template_root()
        transformer = self._create_transformer()

        context = ConversionContext(self.data)
        output = transformer.transform(template_root, context)
        if output is None:
            raise TemplateDiscardedError(etree.QName(template_root).localname)

        logger.debug(f"Converted template <{template_root.tag}>")
        return output

    # -------------------------------- helpers -------------------------------- #

    def _template_root(self) -> etree._Element:
        if isinstance(self.template, etree._Element):
            return self.template
        return load_template(self.template)

    def _create_transformer(self) -> TreeTransformer:
        evaluator = ExpressionEvaluator(actions=self.actions, resolver=self.resolver)
        return TreeTransformer(predicates=self.predicates, evaluator=evaluator)


def convert(
    template: TemplateSource,
    data: Mapping[str, Any],
    *,
    predicates: Optional[Mapping[str, PredicateLike]] = None,
    actions: Optional[Mapping[str, ActionLike]] = None,
    options: Optional[ConvertOptions] = None,
) -> str:
    """Конвертация одной строкой."""
    converter = PojitoConverter(template, options)
    converter.set_data(data)
    if predicates:
        converter.add_predicates(predicates)
    if actions:
        converter.add_actions(actions)
    return converter.convert()


__all__ = ["PojitoConverter", "convert"]
