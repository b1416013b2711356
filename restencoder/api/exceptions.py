"""Exceptions raised while writing responses."""


class BodyEncodingError(Exception):
    """Raised when a response body has no JSON representation."""

    def __init__(self, value: object, cause: Exception):
        self.value_type = type(value).__name__
        self.cause = cause
        super().__init__(f"Cannot encode body of type '{self.value_type}' as JSON: {cause}")
