# realiser/core/__init__.py
"""
Core Domain Layer.

Pure realisation logic, following the Hexagonal Architecture (Ports &
Adapters) pattern:
- No dependencies on infrastructure (files, caches, settings).
- Defines the lexicon interface (Port) that adapters implement.
"""
