"""
Core tagrun components.

This package provides the element tree model and shared type definitions.
"""

from tagrun.core.element import Element
from tagrun.core.types import Attribute, Attributes, CommandArgs

__all__ = [
    "Element",
    "Attribute",
    "Attributes",
    "CommandArgs",
]
