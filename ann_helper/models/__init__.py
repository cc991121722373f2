"""Models and type definitions for ANN-Helper."""

from .types import DecodedNode, DecodedValue, Kind, SearchResultItem, DetailRecord, InfoEntry

__all__ = ["DecodedNode", "DecodedValue", "Kind", "SearchResultItem", "DetailRecord", "InfoEntry"]
