# realiser/core/domain/orthography/__init__.py
"""
Orthography stage (morphophonology and linearisation).

Importing this package registers the English and French ORTHOGRAPHY helpers.
"""

from .base import OrthographyHelper
from .english import EnglishOrthographyHelper
from .french import FrenchOrthographyHelper

__all__ = ["OrthographyHelper", "EnglishOrthographyHelper", "FrenchOrthographyHelper"]
