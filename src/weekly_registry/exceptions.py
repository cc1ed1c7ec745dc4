"""Custom exceptions for registry operations."""


class RegistryError(Exception):
    """Base exception for all registry errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class WeeklyNotFoundError(RegistryError):
    """Raised when no record matches the requested filename."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Weekly not found: {filename}")
