from __future__ import annotations

from .i18n import translate


class DomainError(Exception):
    """Base exception for business rule violations.

    Carries an i18n message key so the controller layer can answer in the
    user's language; ``str(exc)`` is the English text.
    """

    def __init__(self, message_key: str, **params):
        self.message_key = message_key
        self.params = params
        super().__init__(translate(message_key, "en", **params))

    def localized(self, language) -> str:
        return translate(self.message_key, language, **self.params)


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""
