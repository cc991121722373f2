"""Normalization of decoded ANN encyclopedia responses."""

import logging
from typing import Any, List, Optional, Tuple

from .errors import DecodeError, NotFoundTitleError
from .xml_decoder import TEXT_KEY, to_sequence
from ..models.types import DecodedNode, DetailRecord, InfoEntry, Kind, SearchResultItem

logger = logging.getLogger(__name__)

ROOT_TAG = "ann"
KINDS: Tuple[Tuple[str, Kind], ...] = (("anime", "Anime"), ("manga", "Manga"))
UNKNOWN_TITLE = "Unknown Title"


def _root(tree: Any) -> Optional[dict]:
    # <ann/> with no children decodes to "" rather than a mapping
    if not isinstance(tree, dict):
        return None
    ann = tree.get(ROOT_TAG)
    return ann if isinstance(ann, dict) else None


def _text(node: Any) -> Optional[str]:
    """Text of a node whether it decoded to a bare string or a mapping."""
    node = next(iter(to_sequence(node)), None)
    if isinstance(node, dict):
        node = node.get(TEXT_KEY)
    return node if isinstance(node, str) else None


def norm_hit(item: DecodedNode, kind: Kind) -> SearchResultItem:
    ident = _text(item.get("id")) if isinstance(item, dict) else None
    if not ident:
        logger.warning("%s entry without an id: %r", kind, item)
        raise DecodeError()
    return {"id": ident, "name": _text(item.get("name")) or "", "kind": kind}


def normalize_search(tree: Any) -> List[SearchResultItem]:
    ann = _root(tree)
    if ann is None:
        return []

    if "warning" in ann:
        logger.warning("API Warning: %s", _text(ann["warning"]))

    hits: List[SearchResultItem] = []
    for key, kind in KINDS:
        hits.extend(norm_hit(item, kind) for item in to_sequence(ann.get(key)))
    return hits


def norm_info(node: DecodedNode) -> InfoEntry:
    if not isinstance(node, dict):
        return InfoEntry(type_tag="", text=node)
    return InfoEntry(type_tag=_text(node.get("type")) or "", text=_text(node.get(TEXT_KEY)),
                     src=_text(node.get("src")))


def first_info(entries: List[InfoEntry], type_tag: str) -> Optional[str]:
    for e in entries:
        if e.type_tag == type_tag:
            return e.value
    return None


def all_info(entries: List[InfoEntry], type_tag: str) -> List[str]:
    return [e.value for e in entries if e.type_tag == type_tag and e.value is not None]


def normalize_detail(tree: Any) -> DetailRecord:
    """Reduce a detail response to a DetailRecord.

    ``anime`` wins over ``manga`` if the upstream ever returns both. Within the
    info list the first entry of a given type wins, except "Genres" which
    collects every entry in document order.
    """
    ann = _root(tree) or {}
    item, kind = None, "Unknown"
    for key, k in KINDS:
        if ann.get(key):
            item, kind = to_sequence(ann[key])[0], k
            break
    if item is None:
        raise NotFoundTitleError()

    if not isinstance(item, dict):
        item = {}
    infos = [norm_info(i) for i in to_sequence(item.get("info"))]
    return {
        "title": _text(item.get("name")) or UNKNOWN_TITLE,
        "kind": kind,
        "plot": first_info(infos, "Plot Summary"),
        "image": first_info(infos, "Picture"),
        "vintage": first_info(infos, "Vintage"),
        "genres": all_info(infos, "Genres"),
    }
