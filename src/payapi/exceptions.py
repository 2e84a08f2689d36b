"""
Client exceptions.

Every failure raised by this package, whether it comes from the network, an
HTTP error status, parameter encoding or response decoding, is a
``PaymentAPIError``. The ``kind`` attribute tells them apart.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Origin of a ``PaymentAPIError``."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    ENCODING = "encoding"
    DESERIALIZATION = "deserialization"


class PaymentAPIError(Exception):
    """
    Error raised for any failed API operation.

    Attributes:
        message: Human-readable error message
        kind: Where the failure happened
        status_code: HTTP status code, when a response was received
        error_type: Remote error type (e.g. ``invalid_request_error``)
        error_code: Remote machine-readable error code
        param: Request parameter the remote service blamed
        context: Additional context data about the error
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        status_code: int | None = None,
        error_type: str | None = None,
        error_code: str | None = None,
        param: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.error_type = error_type
        self.error_code = error_code
        self.param = param
        self.context = context or {}
        super().__init__(self.message)

    @classmethod
    def from_response_body(
        cls, status_code: int, body: Any, path: str | None = None
    ) -> "PaymentAPIError":
        """Build an error from a non-2xx response body.

        The remote service wraps errors as ``{"error": {"type", "message", ...}}``.
        Anything else is kept verbatim in the message.
        """
        context: dict[str, Any] = {}
        if path:
            context["path"] = path

        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            return cls(
                f"API request failed with status {status_code}: {body}",
                ErrorKind.HTTP_STATUS,
                status_code=status_code,
                context=context,
            )

        return cls(
            error.get("message") or f"API request failed with status {status_code}",
            ErrorKind.HTTP_STATUS,
            status_code=status_code,
            error_type=error.get("type"),
            error_code=error.get("code"),
            param=error.get("param"),
            context=context,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "error_type": self.error_type,
            "error_code": self.error_code,
            "param": self.param,
            "context": self.context,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"status_code={self.status_code!r}, message={self.message!r})"
        )
