"""Response builder driven by ordered response options.

A response is described by a sequence of options, each one a small mutation
of a fresh ResponseConfig. Options apply strictly in call order, so a later
option overrides an earlier one on the same field:

    respond(sink, status_code(201), header("X-Request-Id", rid), json_body(item))

The error options share one coercion rule: if the body already holds an
ErrorResponse only the targeted field changes, otherwise the body is replaced
by a blank ErrorResponse. They also move a 2xx/3xx status to 500.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from restencoder import config
from restencoder.api.exceptions import BodyEncodingError
from restencoder.models import ErrorResponse

if TYPE_CHECKING:
    from restencoder.api.sinks import ResponseSink

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 200
ERROR_STATUS_CODE = 500

# <, > and & only appear inside JSON strings
_HTML_ESCAPES = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"})


@dataclass(frozen=True)
class JSONValue:
    """Arbitrary value to be serialized as the response body."""
    value: Any


@dataclass
class ResponseConfig:
    """All settings needed to write one response."""
    status_code: int = DEFAULT_STATUS_CODE
    headers: dict[str, str] = field(default_factory=dict)
    # None when unset, JSONValue for plain payloads, ErrorResponse for failures
    body: JSONValue | ErrorResponse | None = None


ResponseOption = Callable[[ResponseConfig], None]


def status_code(code: int) -> ResponseOption:
    """Set the response HTTP status code."""

    def apply(cfg: ResponseConfig) -> None:
        cfg.status_code = code

    return apply


def header(key: str, value: str) -> ResponseOption:
    """Set a header entry in the response."""

    def apply(cfg: ResponseConfig) -> None:
        cfg.headers[key] = value

    return apply


def json_body(value: Any) -> ResponseOption:
    """Set the response body to be serialized as JSON.

    Passing None leaves the body unset while still marking the response as
    JSON. An ErrorResponse value is kept as an error body, so later error
    options will update it instead of replacing it.
    """

    def apply(cfg: ResponseConfig) -> None:
        cfg.headers["Content-Type"] = config.JSON_CONTENT_TYPE
        if value is None:
            cfg.body = None
        elif isinstance(value, ErrorResponse):
            cfg.body = value
        else:
            cfg.body = JSONValue(value)

    return apply


def _apply_error_field(cfg: ResponseConfig, **fields: str) -> None:
    if isinstance(cfg.body, ErrorResponse):
        err_res = cfg.body.model_copy(update=fields)
    else:
        err_res = ErrorResponse(**fields)

    cfg.body = err_res
    cfg.headers["Content-Type"] = config.JSON_CONTENT_TYPE

    if 200 <= cfg.status_code <= 399:
        cfg.status_code = ERROR_STATUS_CODE


def error(exc: BaseException) -> ResponseOption:
    """Set the error message on the body from an exception.

    Changes the body to an ErrorResponse and defaults the status code to
    500 (Internal Server Error) unless an error status is already set.
    """

    def apply(cfg: ResponseConfig) -> None:
        _apply_error_field(cfg, message=str(exc))

    return apply


def error_code(code: str) -> ResponseOption:
    """Set the error code on the body.

    Changes the body to an ErrorResponse and defaults the status code to
    500 (Internal Server Error) unless an error status is already set.
    """

    def apply(cfg: ResponseConfig) -> None:
        _apply_error_field(cfg, code=code)

    return apply


def error_message(msg: str | BaseException) -> ResponseOption:
    """Set the error message on the body from a string or an exception.

    Changes the body to an ErrorResponse and defaults the status code to
    500 (Internal Server Error) unless an error status is already set.
    """

    def apply(cfg: ResponseConfig) -> None:
        _apply_error_field(cfg, message=str(msg))

    return apply


def _dump_model(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(body: JSONValue | ErrorResponse) -> bytes:
    """Encode a body as UTF-8 JSON bytes.

    Raises:
        BodyEncodingError: If the value has no JSON representation.
    """
    value = body.value if isinstance(body, JSONValue) else body
    try:
        text = json.dumps(
            value,
            default=_dump_model,
            ensure_ascii=config.JSON_ENSURE_ASCII,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise BodyEncodingError(value, e) from e

    if config.JSON_ESCAPE_HTML:
        text = text.translate(_HTML_ESCAPES)

    if config.JSON_TRAILING_NEWLINE:
        text += "\n"
    return text.encode("utf-8")


def respond(sink: ResponseSink, *options: ResponseOption) -> None:
    """Write the response back to the client.

    Status and headers are always written. The body is written only when one
    is set and it encodes cleanly; an encoding failure is logged and leaves the
    body empty.
    """
    cfg = ResponseConfig()
    for option in options:
        option(cfg)

    sink.write_header(cfg.status_code)

    for key, value in cfg.headers.items():
        sink.set_header(key, value)

    if cfg.body is None:
        return

    try:
        payload = encode_body(cfg.body)
    except BodyEncodingError as e:
        logger.error(f"Failed to encode response body: {e}")
        return

    sink.write(payload)
