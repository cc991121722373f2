"""Metadata tools for ANN-Helper."""

from importlib.metadata import version, PackageNotFoundError

from ..config import AnnConfig
from ..core.errors import SCHEMA

# Version info
try:
    __VERSION__ = version("ann-helper")   # package name in pyproject
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def make_health(config: AnnConfig):
    def health():
        """Health check endpoint."""
        return {"schemaVersion": SCHEMA, "ok": True, "sources": ["ann"], "endpoint": config.api_url}

    return health


def make_about(config: AnnConfig):
    def about():
        """About information for the service."""
        return {
            "schemaVersion": SCHEMA,
            "name": "ann-helper",
            "version": __VERSION__,
            "endpoints": {"ann": config.api_url},
            "limits": {"timeoutSec": config.timeout, "retries": 0},
        }

    return about


def register_tools(mcp, config: AnnConfig):
    """Register meta tools with FastMCP."""
    mcp.tool()(make_health(config))
    mcp.tool()(make_about(config))
