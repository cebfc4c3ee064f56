class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a group (or other target) does not resolve."""


class TransientError(DomainError):
    """Raised on network/backend failures; the caller may retry."""


class CommitInProgressError(ValidationError):
    """Raised when a save is requested while another one is still in flight."""
