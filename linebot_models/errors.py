"""Errors raised when talking to the messaging platform."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class LineBotError(Exception):
    """Base class of every error raised by this package."""


class InvalidSignatureError(LineBotError):
    """The request signature does not match its body."""

    def __init__(self, message: str = "invalid signature") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class APIErrorDetail:
    """One detail entry of an API error response."""

    property: str = ""
    message: str = ""


class APIError(LineBotError):
    """An error status returned by the API."""

    def __init__(
        self,
        code: int,
        message: str | None = None,
        details: Iterable[APIErrorDetail] = (),
    ) -> None:
        self.code = code
        self.message = message
        self.details = tuple(details)
        super().__init__(code, message, self.details)

    def __str__(self) -> str:
        parts = [f"linebot: APIError {self.code} "]
        if self.message is not None or self.details:
            parts.append(self.message or "")
            parts.extend(f"\n[{d.property}] {d.message}" for d in self.details)
        return "".join(parts)