"""MCP tools for ANN-Helper."""

from . import search
from . import details
from . import meta

__all__ = [
    "search",
    "details",
    "meta",
]
