# realiser/core/domain/__init__.py
"""
Domain model: features, categories, elements, phrase specs, the element
factory, the helper registry and the English and French rule sets.
"""
