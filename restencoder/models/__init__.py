"""Wire models for response payloads."""

from .error_response import ErrorResponse

__all__ = ["ErrorResponse"]
