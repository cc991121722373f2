"""Core functionality for ANN-Helper."""

from .http_client import http_get
from .errors import (
    ErrorCategory, ClassifiedError, ValidationError, DecodeError, NotFoundTitleError,
    classify_transport_error, err_payload,
)
from .xml_decoder import decode_xml, to_sequence
from .normalizers import normalize_search, normalize_detail
from .client import EncyclopediaClient

__all__ = [
    "http_get",
    "ErrorCategory", "ClassifiedError", "ValidationError", "DecodeError", "NotFoundTitleError",
    "classify_transport_error", "err_payload",
    "decode_xml", "to_sequence",
    "normalize_search", "normalize_detail",
    "EncyclopediaClient",
]
