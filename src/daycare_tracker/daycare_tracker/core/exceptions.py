class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials are invalid or no user is signed in."""


class StoreError(DomainError):
    """Raised when the document store is unreachable or rejects a write."""
