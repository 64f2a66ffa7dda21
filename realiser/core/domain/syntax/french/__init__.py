# realiser/core/domain/syntax/french/__init__.py
"""French syntax rule set. Importing the package registers its helpers."""

from .clause import FrenchClauseHelper
from .noun_phrase import FrenchNounPhraseHelper
from .phrase import FrenchPhraseHelper
from .verb_phrase import FrenchVerbPhraseHelper

__all__ = [
    "FrenchClauseHelper",
    "FrenchNounPhraseHelper",
    "FrenchPhraseHelper",
    "FrenchVerbPhraseHelper",
]
