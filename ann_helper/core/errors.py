"""Error categories and classification of upstream failures."""

from enum import Enum
from typing import Any, Dict, Optional

import requests

SCHEMA = "1.0.0"
SOURCE = "ann"


class ErrorCategory(str, Enum):
    RATE_LIMITED = "RATE_LIMITED"
    NOT_FOUND = "NOT_FOUND"
    NOT_FOUND_TITLE = "NOT_FOUND_TITLE"
    TRANSPORT = "TRANSPORT"
    VALIDATION = "VALIDATION"
    DECODE = "DECODE"
    UNKNOWN = "UNKNOWN"


MESSAGES = {
    ErrorCategory.RATE_LIMITED: "Server is busy (rate limit). Please wait a few seconds and try again.",
    ErrorCategory.NOT_FOUND: "Resource not found.",
    ErrorCategory.NOT_FOUND_TITLE: "Title not found.",
    ErrorCategory.TRANSPORT: "Failed to fetch data from Anime News Network. Please try again.",
    ErrorCategory.VALIDATION: "Please enter a search term.",
    ErrorCategory.DECODE: "Anime News Network returned a malformed response.",
    ErrorCategory.UNKNOWN: "Unexpected error.",
}


class ClassifiedError(Exception):
    """A failure reduced to a category and a fixed display message."""

    category = ErrorCategory.UNKNOWN

    def __init__(self, category: Optional[ErrorCategory] = None, message: Optional[str] = None,
                 status_code: Optional[int] = None):
        if category is not None:
            self.category = category
        self.message = message or MESSAGES[self.category]
        self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self, source: str = SOURCE) -> Dict[str, Any]:
        return err_payload(source, self.category.value, self.message)


class ValidationError(ClassifiedError):
    """Raised before any network call when the input is unusable."""

    category = ErrorCategory.VALIDATION


class DecodeError(ClassifiedError):
    """Raised when the upstream body is not well-formed XML or misses a required field."""

    category = ErrorCategory.DECODE


class NotFoundTitleError(ClassifiedError):
    """Raised when a decoded detail response holds neither anime nor manga."""

    category = ErrorCategory.NOT_FOUND_TITLE


def classify_status(status_code: Optional[int]) -> ErrorCategory:
    if status_code == 503:
        return ErrorCategory.RATE_LIMITED
    if status_code == 404:
        return ErrorCategory.NOT_FOUND
    return ErrorCategory.TRANSPORT


def classify_transport_error(exc: requests.RequestException) -> ClassifiedError:
    """Map a requests failure to a ClassifiedError.

    Only 503 and 404 get their own categories. Any other status, and network
    level failures (timeouts, refused connections) that carry no response,
    fall back to TRANSPORT.
    """
    response = getattr(exc, "response", None)
    status_code = response.status_code if response is not None else None
    return ClassifiedError(classify_status(status_code), status_code=status_code)


def err_payload(source: str, code: str, message: str) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}
