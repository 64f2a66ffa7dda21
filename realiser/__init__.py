# realiser/__init__.py
"""
realiser - rule-based surface realisation for English and French.

Turns trees of feature-tagged elements (clauses, noun phrases, verb
phrases...) into text through four stages: syntax, morphology,
morphophonology and orthography. Hexagonal layout:

- core/domain   element model, helper registry and per-language rules
- core/ports    the lexicon contract
- core/use_cases the Realiser pipeline
- adapters      the bundled JSON lexicons
- shared        configuration, logging, tracing and wiring
"""

__version__ = "1.0.0"
