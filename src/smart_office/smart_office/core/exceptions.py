class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransitionError(ValidationError):
    """Raised by a strict transition policy for a status change outside the lifecycle."""


class AuthenticationError(DomainError):
    """Raised when there is no logged-in user or credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class BackendUnavailable(DomainError):
    """Raised by the remote client when the backend cannot serve a call.

    Covers network errors, timeouts, non-2xx responses and malformed payloads.
    Services never let it escape: it selects the local fallback path.
    """
