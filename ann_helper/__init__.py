"""ANN-Helper package.

Exports the FastMCP app factory `create_app` and the `EncyclopediaClient`.
"""
from .server import create_app
from .core.client import EncyclopediaClient

__all__ = ["create_app", "EncyclopediaClient"]
