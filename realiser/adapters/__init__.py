# realiser/adapters/__init__.py
"""
Infrastructure adapters implementing the core ports.
"""
