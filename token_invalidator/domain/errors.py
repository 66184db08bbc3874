"""Exceptions raised across the port boundary."""

from typing import Optional


class TokenInvalidatorError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(TokenInvalidatorError):
    """Startup configuration is missing or invalid."""


class ReportError(TokenInvalidatorError):
    """A single report failed. Never fatal for the process."""

    stage = "report"


class PayloadSerializationError(ReportError):
    stage = "serialize"


class PasteTransportError(ReportError):
    stage = "transport"


class PasteResponseError(ReportError):
    """The paste service answered with an unusable response."""

    stage = "response"

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

    def __str__(self) -> str:
        return f"{super().__str__()} (status={self.status})"


class ReplyDeliveryError(ReportError):
    stage = "reply"
