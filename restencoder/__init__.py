"""Uniform JSON responses built from ordered response options."""

from restencoder.api.errors import respond_error, with_code, with_message, with_status
from restencoder.api.exceptions import BodyEncodingError
from restencoder.api.response import (
    ResponseConfig,
    ResponseOption,
    error,
    error_code,
    error_message,
    header,
    json_body,
    respond,
    status_code,
)
from restencoder.api.sinks import (
    RecordingSink,
    ResponseSink,
    StarletteSink,
    error_json_response,
    json_response,
)
from restencoder.models import ErrorResponse

__all__ = [
    "BodyEncodingError",
    "ErrorResponse",
    "RecordingSink",
    "ResponseConfig",
    "ResponseOption",
    "ResponseSink",
    "StarletteSink",
    "error",
    "error_code",
    "error_json_response",
    "error_message",
    "header",
    "json_body",
    "json_response",
    "respond",
    "respond_error",
    "status_code",
    "with_code",
    "with_message",
    "with_status",
]
