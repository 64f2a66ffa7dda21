# realiser/adapters/persistence/__init__.py
