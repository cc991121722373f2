"""HTTP client and network functions for ANN-Helper."""

import logging

import requests

from ..config import DEFAULT_TIMEOUT, UA

logger = logging.getLogger(__name__)


def _req(method: str, url: str, **kw) -> requests.Response:
    """Single request, no retries. Non-2xx statuses raise requests.HTTPError."""
    timeout = kw.pop("timeout", DEFAULT_TIMEOUT)
    headers = {"User-Agent": UA, **kw.pop("headers", {})}

    logger.info("Fetching: %s", url)
    try:
        r = requests.request(method, url, timeout=timeout, headers=headers, **kw)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        logger.warning("Upstream returned HTTP %s for %s", status, url)
        raise
    except requests.RequestException as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise
    return r


def http_get(url: str, **kw) -> requests.Response:
    return _req("GET", url, **kw)
