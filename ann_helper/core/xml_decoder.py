"""XML to plain dict/list/str trees.

Attributes are merged into the same mapping as child elements, and element
text that sits next to attributes or children is kept under ``TEXT_KEY``.
A child name seen once decodes to a single node; seen more than once it
decodes to a list. Callers never know the cardinality in advance and must go
through :func:`to_sequence` before iterating.
"""

import logging
from typing import Any, Dict, List, Optional, Union
from xml.etree.ElementTree import Element

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

from .errors import DecodeError
from ..models.types import DecodedNode, DecodedValue

logger = logging.getLogger(__name__)

TEXT_KEY = "_"


def _merge(node: Dict[str, Any], key: str, value: DecodedNode) -> None:
    if key not in node:
        node[key] = value
    elif isinstance(node[key], list):
        node[key].append(value)
    else:
        node[key] = [node[key], value]


def _element_to_node(el: Element) -> DecodedNode:
    node: Dict[str, Any] = dict(el.attrib)
    for child in el:
        _merge(node, child.tag, _element_to_node(child))

    text = "".join(
        [el.text or ""] + [child.tail or "" for child in el]
    )
    if not node:
        return text
    if text.strip():
        node[TEXT_KEY] = text
    return node


def decode_xml(text: Union[str, bytes]) -> Dict[str, DecodedNode]:
    """Parse XML text into ``{root_tag: node}``. Raises DecodeError if malformed."""
    try:
        root = ElementTree.fromstring(text)
    except (ElementTree.ParseError, DefusedXmlException) as e:
        logger.warning("Malformed XML from upstream: %s", e)
        raise DecodeError() from e
    return {root.tag: _element_to_node(root)}


def to_sequence(node: Optional[DecodedValue]) -> List[DecodedNode]:
    if node is None:
        return []
    if isinstance(node, list):
        return list(node)
    return [node]
