class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AlreadyCheckedInError(ValidationError):
    """Raised when checking in an employee that already has an open check-in."""


class NotCheckedInError(ValidationError):
    """Raised when checking out an employee without an open check-in."""


class NotFoundError(DomainError):
    """Raised when an employee id does not match any record."""


class StaleRecordError(DomainError):
    """Raised when a guarded update lost the race against another writer."""


class StorageError(Exception):
    """Raised when the backing store is unreachable or a write fails."""
