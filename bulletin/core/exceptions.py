"""Custom exceptions for bulletin."""


class BulletinError(Exception):
    """Base exception for all bulletin errors."""


class ConfigurationError(BulletinError):
    """Raised when configuration is invalid."""


class ValidationError(BulletinError):
    """Raised when input validation fails."""


class RecordNotFoundError(BulletinError, KeyError):
    """Raised when no live record has the requested id."""

    def __init__(self, record_id: object, message: str | None = None) -> None:
        super().__init__(message or f"Record not found: {record_id!r}")
        self.record_id = record_id

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateIdError(BulletinError):
    """Raised when an id is already used by a live record."""

    def __init__(self, record_id: object, message: str | None = None) -> None:
        super().__init__(message or f"Duplicate id: {record_id!r}")
        self.record_id = record_id


class EmptyQueueError(BulletinError, IndexError):
    """Raised when dequeue/peek is called with no events queued."""


class InvariantViolationError(BulletinError):
    """Raised when a structural invariant check fails."""

    def __init__(self, message: str, invariant: int | None = None) -> None:
        super().__init__(message)
        self.invariant = invariant


class UserNotFoundError(RecordNotFoundError):
    """Raised when no user with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"User not found: {name!r}")


class DuplicateUserError(DuplicateIdError):
    """Raised when a user with the same name and role already exists."""

    def __init__(self, name: str, role: str) -> None:
        super().__init__(name, f"User already exists: {name!r} ({role})")
        self.role = role
