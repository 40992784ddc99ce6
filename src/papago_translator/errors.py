# SPDX-License-Identifier: Apache-2.0
"""Error definitions for the Papago client."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories a translation request can end in."""

    CONFIG = "config"
    INPUT = "input"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    SERVICE = "service"
    PARSE = "parse"


class PapagoError(Exception):
    """Base exception for the Papago client.

    Attributes:
        kind: Failure category.
        message: Human-readable message, also used as ``str(error)``.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(PapagoError):
    """Client ID or client secret is missing.

    This error type is NOT retryable - fix the credentials first.
    """

    kind = ErrorKind.CONFIG


class InputError(PapagoError):
    """Empty text or an unrecognized language identifier."""

    kind = ErrorKind.INPUT


class TransportError(PapagoError):
    """The request never produced a response (DNS, TLS, connection reset, ...)."""

    kind = ErrorKind.TRANSPORT


class ProtocolError(PapagoError):
    """A response was received but it was not a valid HTTP response."""

    kind = ErrorKind.PROTOCOL


class ServiceError(PapagoError):
    """The service answered with a non-2xx status code."""

    kind = ErrorKind.SERVICE

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(PapagoError):
    """The service answered 2xx but the body has an unexpected shape."""

    kind = ErrorKind.PARSE
