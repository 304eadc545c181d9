"""Errors raised while decoding Figma webhook payloads."""

from __future__ import annotations


class MalformedPayloadError(ValueError):
    """Raised when a webhook body cannot be decoded into a Figma event.

    Attributes
    ----------
    detail
        Decoder message describing the first problem found.

    """

    def __init__(self, message: str, *, detail: str) -> None:
        """Initialise with a caller-facing message and decoder detail."""
        self.detail = detail
        super().__init__(message)

    @classmethod
    def invalid_json(cls, detail: str) -> MalformedPayloadError:
        """Return an error for bodies that are not a valid webhook document."""
        return cls(f"Invalid JSON: {detail}", detail=detail)

    @classmethod
    def empty_body(cls) -> MalformedPayloadError:
        """Return an error for requests without a body."""
        return cls.invalid_json("request body is empty")
