"""Exception classes for medoc-check operations."""


class MedocCheckError(Exception):
    """Base exception for medoc-check operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed (a path,
                a config key, a service name).

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ConfigurationError(MedocCheckError):
    """Raised for operator errors: bad encoding, missing logs directory."""

    error_prefix = "Invalid configuration"


class CheckpointError(MedocCheckError):
    """Raised when the checkpoint file cannot be written."""

    error_prefix = "Checkpoint update failed"


class NotificationError(MedocCheckError):
    """Raised when a notification could not be delivered."""

    error_prefix = "Notification failed"
