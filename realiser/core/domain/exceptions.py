# realiser/core/domain/exceptions.py
from typing import Any, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Configuration Errors ---

class LanguageNotSupportedError(DomainError):
    """Raised when no rule set is registered for a language (or language/role pair)."""
    def __init__(self, language: Any, role: Optional[str] = None):
        self.language = language
        self.role = role
        code = getattr(language, "value", language)
        if role:
            super().__init__(f"No '{role}' helper is registered for language '{code}'.")
        else:
            super().__init__(f"Language '{code}' is not supported by the realiser.")

class MissingClosedClassWordError(DomainError):
    """Raised when a closed-class word the grammar depends on is absent from the lexicon."""
    def __init__(self, word: str, category: Any, language: Any):
        self.word = word
        self.category = category
        self.language = language
        cat = getattr(category, "value", category)
        code = getattr(language, "value", language)
        super().__init__(
            f"Required closed-class word '{word}' ({cat}) is missing from the '{code}' lexicon."
        )

class HelperRegistrationError(DomainError):
    """Raised when a helper registration is duplicated or malformed."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid helper registration: {reason}")

# --- Input Errors ---

class UnsupportedFeatureCombinationError(DomainError):
    """Raised in strict mode for feature combinations with no defined realisation."""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Unsupported feature combination: {detail}")

# --- Process Errors ---

class RealisationError(DomainError):
    """Raised when the pipeline fails for a reason other than a domain error."""
    def __init__(self, details: str):
        super().__init__(f"Realisation failed: {details}")
