# realiser/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by the use cases and the adapters:
- Configuration management (pydantic-settings)
- Structured logging (structlog)
- Tracing (OpenTelemetry)

The domain layer never imports from here; options it needs (strict mode,
comma placement) are passed in when the helper registry is built.
"""
