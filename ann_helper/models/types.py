"""Type definitions for ANN-Helper."""

from dataclasses import dataclass
from typing import TypedDict, Optional, List, Dict, Union, Literal

# Decoded XML: text content, or a mapping of attribute/child name to node(s).
DecodedNode = Union[str, Dict[str, "DecodedValue"]]
DecodedValue = Union[DecodedNode, List[DecodedNode]]

Kind = Literal["Anime", "Manga"]


class SearchResultItem(TypedDict):
    id: str
    name: str
    kind: Kind


class DetailRecord(TypedDict):
    title: str
    kind: Literal["Anime", "Manga", "Unknown"]
    plot: Optional[str]
    image: Optional[str]         # Picture src
    vintage: Optional[str]
    genres: List[str]


@dataclass(frozen=True)
class InfoEntry:
    type_tag: str
    text: Optional[str] = None
    src: Optional[str] = None

    @property
    def value(self) -> Optional[str]:
        return self.src if self.type_tag == "Picture" else self.text
