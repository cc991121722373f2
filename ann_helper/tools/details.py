"""Title details tools for ANN-Helper."""

import logging

from ..core.client import EncyclopediaClient
from ..core.errors import ClassifiedError, ErrorCategory, MESSAGES, SCHEMA, SOURCE, err_payload

logger = logging.getLogger(__name__)


def make_title_details(client: EncyclopediaClient):
    def title_details(id: str):
        """Normalized record for one ANN id: title, kind, plot, image, vintage, genres."""
        try:
            det = dict(client.fetch_detail(id))
            det["schemaVersion"] = SCHEMA
            det["id"] = id
            return det
        except ClassifiedError as e:
            return e.to_payload()
        except Exception:
            logger.exception("title_details failed for %r", id)
            return err_payload(SOURCE, ErrorCategory.UNKNOWN.value, MESSAGES[ErrorCategory.UNKNOWN])

    return title_details


def register_tools(mcp, client: EncyclopediaClient):
    mcp.tool()(make_title_details(client))
