"""Encyclopedia client: fetch, decode and normalize in one call."""

import logging
import urllib.parse
from typing import Any, Callable, List, Optional

import requests

from .errors import ValidationError, classify_transport_error
from .http_client import http_get
from .normalizers import normalize_detail, normalize_search
from .xml_decoder import decode_xml
from ..config import AnnConfig
from ..models.types import DetailRecord, SearchResultItem

logger = logging.getLogger(__name__)


class EncyclopediaClient:
    """Search and detail lookups against the ANN encyclopedia API.

    Each call performs exactly one GET. Transport failures are raised as
    ClassifiedError; DecodeError and NotFoundTitleError pass through.
    """

    def __init__(self, config: Optional[AnnConfig] = None,
                 get: Callable[..., requests.Response] = http_get):
        self.config = config or AnnConfig()
        self._get = get

    def _fetch(self, title_param: str) -> Any:
        url = f"{self.config.api_url}?title={title_param}"
        try:
            r = self._get(url, timeout=self.config.timeout,
                          headers={"User-Agent": self.config.user_agent})
        except requests.RequestException as e:
            raise classify_transport_error(e) from e
        # raw bytes so the parser honours the XML encoding declaration
        return decode_xml(r.content)

    def search(self, query: str) -> List[SearchResultItem]:
        query = (query or "").strip()
        if not query:
            raise ValidationError()
        # "~" asks for a substring match instead of an exact title
        tree = self._fetch("~" + urllib.parse.quote(query, safe=""))
        return normalize_search(tree)

    def fetch_detail(self, identifier: str) -> DetailRecord:
        identifier = str(identifier or "").strip()
        if not identifier:
            raise ValidationError(message="Please provide a title id.")
        tree = self._fetch(urllib.parse.quote(identifier, safe=""))
        return normalize_detail(tree)
