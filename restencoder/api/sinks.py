"""Output targets for respond and respond_error.

A sink receives the status code, then each header, then at most one body
write. RecordingSink keeps everything in memory; StarletteSink turns the
writes into a Starlette/FastAPI Response that a route handler can return.
"""

from typing import Protocol, runtime_checkable

from fastapi import Response
from starlette.datastructures import MutableHeaders

from restencoder.api.errors import ErrorOption, respond_error
from restencoder.api.response import DEFAULT_STATUS_CODE, ResponseOption, respond


@runtime_checkable
class ResponseSink(Protocol):
    """An in-progress HTTP response."""

    def write_header(self, status_code: int) -> None:
        """Send the status code. Called once, before any header."""
        ...

    def set_header(self, key: str, value: str) -> None:
        """Set one header, replacing any previous value for the key."""
        ...

    def write(self, data: bytes) -> None:
        """Append bytes to the response body."""
        ...


class RecordingSink:
    """In-memory sink that records what was written, for tests and tooling."""

    def __init__(self) -> None:
        self.code = DEFAULT_STATUS_CODE
        self.headers = MutableHeaders()
        self.body = bytearray()
        self.wrote_header = False

    def write_header(self, status_code: int) -> None:
        if self.wrote_header:
            return
        self.code = status_code
        self.wrote_header = True

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def write(self, data: bytes) -> None:
        if not self.wrote_header:
            self.write_header(DEFAULT_STATUS_CODE)
        self.body.extend(data)

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8")


class StarletteSink:
    """Sink that collects writes into a FastAPI Response."""

    def __init__(self) -> None:
        self.status_code = DEFAULT_STATUS_CODE
        self.headers = MutableHeaders()
        self._chunks: list[bytes] = []

    def write_header(self, status_code: int) -> None:
        self.status_code = status_code

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def write(self, data: bytes) -> None:
        self._chunks.append(data)

    @property
    def response(self) -> Response:
        """Response carrying everything written so far."""
        return Response(
            content=b"".join(self._chunks),
            status_code=self.status_code,
            headers=self.headers,
        )


def json_response(*options: ResponseOption) -> Response:
    """Build a FastAPI Response with respond and the given options."""
    sink = StarletteSink()
    respond(sink, *options)
    return sink.response


def error_json_response(*options: ErrorOption) -> Response:
    """Build a FastAPI error Response with respond_error and the given options."""
    sink = StarletteSink()
    respond_error(sink, *options)
    return sink.response
