"""Standalone error responses.

respond_error always starts from a blank ErrorResponse and never rewrites the
status code on its own: without with_status the response keeps the builder
default.

    respond_error(sink, with_status(404), with_code("NOT_FOUND"), with_message(exc))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from restencoder.api.response import ResponseOption, json_body, respond, status_code
from restencoder.models import ErrorResponse

if TYPE_CHECKING:
    from restencoder.api.sinks import ResponseSink


@dataclass
class ErrorConfig:
    """Fields accumulated by error options."""
    status_code: int | None = None
    code: str = ""
    message: str = ""


ErrorOption = Callable[[ErrorConfig], None]


def with_status(code: int) -> ErrorOption:
    """Set the HTTP status code of the error response."""

    def apply(cfg: ErrorConfig) -> None:
        cfg.status_code = code

    return apply


def with_code(code: str) -> ErrorOption:
    """Set the error code of the error response."""

    def apply(cfg: ErrorConfig) -> None:
        cfg.code = code

    return apply


def with_message(msg: str | BaseException) -> ErrorOption:
    """Set the error message from a string or an exception."""

    def apply(cfg: ErrorConfig) -> None:
        cfg.message = str(msg)

    return apply


def respond_error(sink: ResponseSink, *options: ErrorOption) -> None:
    """Write an ErrorResponse built from the given error options."""
    cfg = ErrorConfig()
    for option in options:
        option(cfg)

    response_options: list[ResponseOption] = []
    if cfg.status_code is not None:
        response_options.append(status_code(cfg.status_code))
    response_options.append(json_body(ErrorResponse(code=cfg.code, message=cfg.message)))

    respond(sink, *response_options)
