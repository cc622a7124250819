"""
Unified test infrastructure for Pojito.

Modules:
- file_utils: Utilities for creating files and directories
- data_objects: Sample data graph objects (accessors, properties, readers)
- rendering_utils: Shortcuts for running the transformer on template text
"""

from .file_utils import write, write_template
from .data_objects import Address, Bag, Counter, Exploding, Person
from .rendering_utils import compact, render

__all__ = [
    "write", "write_template",
    "Address", "Bag", "Counter", "Exploding", "Person",
    "compact", "render",
]
