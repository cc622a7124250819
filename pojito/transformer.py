"""
Рекурсивное преобразование дерева шаблона в выходное дерево.

Для каждого узла шаблона:
1. создаётся выходной узел с тем же именем;
2. вычисляются атрибуты; атрибут с именем зарегистрированного предиката
   решает судьбу узла (ложь - узел и всё поддерево отбрасываются),
   остальные копируются, если значение не None;
3. вычисляется текст; если это коллекция, дочерние узлы шаблона
   повторяются для каждого её элемента (элемент становится корнем);
4. иначе (или если развёртывание не дало ни одного узла) дочерние узлы
   шаблона обходятся обычной рекурсией.
"""

from __future__ import annotations

import logging
from typing import Any, Collection, Dict, Optional

from lxml import etree

from .context import ConversionContext
from .expressions.evaluator import ExpressionEvaluator
from .expressions.parser import contains_expression
from .extensions.registry import PredicateRegistry
from .markup import element_children, element_text, local_name
from .utils import is_collection

logger = logging.getLogger(__name__)


def _own_namespaces(template: etree._Element) -> Dict[Optional[str], str]:
    """Пространства имён, объявленные именно на этом узле шаблона."""
    parent = template.getparent()
    inherited = parent.nsmap if parent is not None else {}
    return {
        prefix: uri
        for prefix, uri in template.nsmap.items()
        if inherited.get(prefix) != uri
    }


class TreeTransformer:
    """
    Копирует дерево шаблона, подставляя значения выражений.

    Не хранит состояния конвертации: корень вычисления живёт
    в ConversionContext, который передаётся в каждый вызов.
    """

    def __init__(
        self,
        predicates: Optional[PredicateRegistry] = None,
        evaluator: Optional[ExpressionEvaluator] = None,
    ):
        self.predicates = predicates if predicates is not None else PredicateRegistry()
        self.evaluator = evaluator if evaluator is not None else ExpressionEvaluator()

    def transform(self, template: etree._Element, context: ConversionContext) -> Optional[etree._Element]:
        """
        Преобразует узел шаблона вместе с поддеревом.

        Args:
            template: Узел шаблона (не изменяется)
            context: Контекст конвертации с текущим корнем

        Returns:
            Новый выходной узел или None, если предикат отбросил узел
        """
        output = etree.Element(template.tag, nsmap=_own_namespaces(template))

        if not self._copy_attributes(template, output, context):
            return None

        self._copy_content(template, output, context)
        return output

    def _copy_attributes(
        self,
        template: etree._Element,
        output: etree._Element,
        context: ConversionContext,
    ) -> bool:
        """
        Копирует атрибуты, вычисляя выражения.

        Returns:
            False, если какой-то предикат дал ложь (первый ложный побеждает,
            следующие атрибуты не вычисляются)
        """
        for name, raw_value in template.attrib.items():
            value = self.evaluator.evaluate(raw_value, context)

            predicate_name = local_name(name)
            if self.predicates.is_registered(predicate_name):
                if not self.predicates.evaluate(predicate_name, value):
                    logger.debug(f"<{template.tag}> discarded by predicate '{predicate_name}'")
                    return False
            elif value is not None:
                output.set(name, str(value))

        return True

    def _copy_content(
        self,
        template: etree._Element,
        output: etree._Element,
        context: ConversionContext,
    ) -> None:
        """
        Вычисляет текст узла и заполняет дочерние узлы.

        Непустая коллекция развёртывается; если все повторённые узлы
        отброшены предикатами и выход остался без детей, дочерние узлы
        обходятся ещё раз обычной рекурсией относительно текущего корня.

        Пустая коллекция, как и выражение со значением None на узле
        с дочерними элементами, считается отсутствующей коллекцией:
        дети не обходятся вовсе. Платой за это является смешанное
        содержимое: в <p>${nick}<name>${name}</name></p> при nick == None
        теряется и <name>. Литеральный текст без выражения этого правила
        не включает.
        """
        text = element_text(template)
        value = self.evaluator.evaluate(text, context)

        if is_collection(value):
            if len(value) > 0:
                self._expand_collection(template, output, value, context)
                if len(output) == 0:
                    self._append_children(template, output, context)
            return

        has_children = next(element_children(template), None) is not None
        if value is None and has_children and contains_expression(text):
            # Отсутствующая коллекция: повторять нечего
            return

        if value is not None:
            rendered = str(value)
            output.text = rendered if rendered else None

        self._append_children(template, output, context)

    def _expand_collection(
        self,
        template: etree._Element,
        output: etree._Element,
        collection: Collection[Any],
        context: ConversionContext,
    ) -> None:
        """Повторяет дочерние узлы шаблона для каждого элемента коллекции."""
        logger.debug(
            f"Expanding <{template.tag}> over {len(collection)} element(s) at depth {context.depth}"
        )
        for item in collection:
            with context.element(item):
                self._append_children(template, output, context)

    def _append_children(
        self,
        template: etree._Element,
        output: etree._Element,
        context: ConversionContext,
    ) -> None:
        for child in element_children(template):
            transformed = self.transform(child, context)
            if transformed is not None:
                output.append(transformed)


__all__ = ["TreeTransformer"]
