"""
Pojito: отображение графа объектов в XML по декларативному шаблону.

Шаблон - XML-документ, в атрибутах и тексте которого встречаются
выражения ${путь;действие=параметр}. Атрибуты с именами предикатов
фильтруют узлы, текст-коллекция повторяет поддерево для каждого элемента.
"""

from __future__ import annotations

from .context import ConversionContext
from .converter import PojitoConverter, convert
from .errors import (
    DataLoadError,
    ExpressionParseError,
    ExtensionValueError,
    PojitoUserError,
    PropertyResolutionError,
    TemplateDiscardedError,
    TemplateLoadError,
    UnknownActionError,
    UnknownExtensionError,
    UnknownPredicateError,
)
from .extensions import Action, Predicate
from .properties import PropertyReader, resolve_property
from .types import ConvertOptions
from .version import tool_version

__version__ = tool_version()

__all__ = [
    "__version__",
    "PojitoConverter",
    "convert",
    "ConvertOptions",
    "ConversionContext",
    "Predicate",
    "Action",
    "PropertyReader",
    "resolve_property",
    "PojitoUserError",
    "TemplateLoadError",
    "DataLoadError",
    "PropertyResolutionError",
    "UnknownExtensionError",
    "UnknownPredicateError",
    "UnknownActionError",
    "ExpressionParseError",
    "ExtensionValueError",
    "TemplateDiscardedError",
]
