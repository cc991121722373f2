"""Search tools for ANN-Helper."""

import logging

from ..core.client import EncyclopediaClient
from ..core.errors import ClassifiedError, ErrorCategory, MESSAGES, SCHEMA, SOURCE, err_payload

logger = logging.getLogger(__name__)


def make_search_titles(client: EncyclopediaClient):
    def search_titles(query: str):
        """
        Search ANN anime and manga by title fragment.
        Returns anime hits first, then manga, in upstream order.
        """
        try:
            hits = client.search(query)
            return {"schemaVersion": SCHEMA, "query": query, "results": hits}
        except ClassifiedError as e:
            return e.to_payload()
        except Exception:
            logger.exception("search_titles failed for %r", query)
            return err_payload(SOURCE, ErrorCategory.UNKNOWN.value, MESSAGES[ErrorCategory.UNKNOWN])

    return search_titles


def register_tools(mcp, client: EncyclopediaClient):
    """Register search-related tools with FastMCP."""
    mcp.tool()(make_search_titles(client))
