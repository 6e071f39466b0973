"""
public_ip/exceptions.py

Responsibility: Defines all custom exception classes raised while resolving
the public IP address.
Does NOT: contain business logic, logging, or HTTP handling.
"""

from __future__ import annotations


class ResolutionError(Exception):
    """
    Base class for every failure raised by the public IP resolver.

    Callers that do not care why resolution failed catch this; callers that
    do can branch on the concrete subclass.
    """


class TransportError(ResolutionError):
    """
    Raised when no usable HTTP response body could be obtained.

    Covers DNS failures, refused connections, TLS errors, malformed URLs and
    bodies that are not valid UTF-8. The underlying error is kept as
    __cause__.
    """

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Could not reach IP provider ({endpoint}): {reason}")


class HttpStatusError(ResolutionError):
    """
    Raised when the IP provider answers with a non-2xx status code.

    The response body is never inspected in this case.
    """

    def __init__(self, endpoint: str, status_code: int, reason: str = "") -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason
        message = f"IP provider ({endpoint}) returned status {status_code}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class ParseError(ResolutionError):
    """
    Raised when a body cannot be parsed as a dotted-decimal IPv4 address.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Failed parsing {text} as ipv4 address: {reason}")
