# realiser/core/domain/morphology/__init__.py
"""
Morphology stage.

Importing this package registers the English and French MORPHOLOGY helpers.
"""

from .base import MorphologyHelper
from .english import EnglishMorphologyHelper
from .french import FrenchMorphologyHelper

__all__ = ["MorphologyHelper", "EnglishMorphologyHelper", "FrenchMorphologyHelper"]
