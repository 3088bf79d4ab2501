"""Parser implementations."""

from .base import BaseParser
from .module_parser import ModuleParser

__all__ = [
    "BaseParser",
    "ModuleParser",
]
