"""Parsing of the request line of an HTTP/1.1 request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, TextIO, Union

SUPPORTED_VERSION = "HTTP/1.1"


class RequestError(ValueError):
    """Base class for malformed HTTP requests."""


class InvalidRequestLineError(RequestError):
    """The request line does not have exactly three parts."""

    def __init__(self, message: str = (
        "request line must contain exactly three parts: "
        "method, request-target, HTTP-version"
    )) -> None:
        super().__init__(message)


class InvalidMethodError(RequestError):
    """The request method is not made of capital letters only."""

    def __init__(self, message: str = "request method must be capital alphabetic characters") -> None:
        super().__init__(message)


class InvalidVersionError(RequestError):
    """The HTTP version is not HTTP/1.1."""

    def __init__(self, message: str = "HTTP-version must be HTTP/1.1") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class RequestLine:
    """The method, target and version of a request."""

    http_version: str = ""
    request_target: str = ""
    method: str = ""


@dataclass(frozen=True)
class Request:
    """A parsed HTTP request."""

    request_line: RequestLine = field(default_factory=RequestLine)


def _is_upper(text: str) -> bool:
    return all(ch.isupper() for ch in text)


def parse_request_line(raw: str) -> RequestLine:
    """Parse the first CRLF-terminated line of ``raw`` as a request line."""
    first_line = raw.split("\r\n", 1)[0]
    parts = first_line.split(" ")
    if len(parts) != 3:
        raise InvalidRequestLineError()

    method, target, version = parts
    if not _is_upper(method):
        raise InvalidMethodError()
    if version != SUPPORTED_VERSION:
        raise InvalidVersionError()

    return RequestLine(
        http_version=version.split("/")[1],
        request_target=target,
        method=method,
    )


def request_from_reader(reader: Union[BinaryIO, TextIO]) -> Request:
    """Read everything from ``reader`` and parse it as an HTTP request."""
    data = reader.read()
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    return Request(request_line=parse_request_line(data))