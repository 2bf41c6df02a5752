"""Custom exceptions for the publication model."""


class ModelError(Exception):
    """Base exception for all model errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidCirculationError(ModelError, ValueError):
    """Raised when an edition is given a negative circulation."""

    def __init__(
        self, value: int, message: str = "Circulation cannot be negative."
    ):
        self.value = value
        super().__init__(message)
