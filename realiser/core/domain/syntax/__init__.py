# realiser/core/domain/syntax/__init__.py
"""
Syntax stage: turns phrase specifications into ordered lists of inflectable
words. The language-neutral skeleton lives here; `english` and `french`
hold the rule sets.
"""

from .clause import AbstractClauseHelper
from .noun_phrase import AbstractNounPhraseHelper
from .phrase import GenericPhraseHelper, SyntaxHelper
from .verb_phrase import AbstractVerbPhraseHelper

__all__ = [
    "AbstractClauseHelper",
    "AbstractNounPhraseHelper",
    "AbstractVerbPhraseHelper",
    "GenericPhraseHelper",
    "SyntaxHelper",
]
