# realiser/core/domain/syntax/english/__init__.py
"""English syntax rule set. Importing the package registers its helpers."""

from .clause import EnglishClauseHelper
from .noun_phrase import EnglishNounPhraseHelper
from .phrase import EnglishPhraseHelper
from .verb_phrase import EnglishVerbPhraseHelper

__all__ = [
    "EnglishClauseHelper",
    "EnglishNounPhraseHelper",
    "EnglishPhraseHelper",
    "EnglishVerbPhraseHelper",
]
