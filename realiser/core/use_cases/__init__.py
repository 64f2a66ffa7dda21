# realiser/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

`Realiser` orchestrates the realisation stages over a snapshot of the
caller's element tree.
"""

from .realise_text import Realiser

__all__ = ["Realiser"]
