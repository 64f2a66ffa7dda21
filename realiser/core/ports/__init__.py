# realiser/core/ports/__init__.py
"""
Ports (interfaces) the core expects the outside world to implement.
"""

from .lexicon_port import ILexicon

__all__ = ["ILexicon"]
