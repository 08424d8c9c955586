"""
Data types shared by the discoverer, tree builder and fetcher.

Content items form a tagged union: every class carries a ``kind`` that the
mapper dispatches on. Output elements stay plain dicts so results serialise
straight to JSON.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class PageMetadata:
    title: str = ""
    description: str = ""
    language: str = ""
    source_url: str = ""


@dataclass(frozen=True)
class PageRecord:
    """A fetched page as delivered by the scraping service."""
    html: str = ""
    markdown: str = ""
    content: str = ""
    metadata: PageMetadata = field(default_factory=PageMetadata)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PageRecord":
        """Build a record from the scraper's camelCase payload."""
        if not isinstance(data, dict):
            return cls()
        meta = data.get("metadata") or {}
        if not isinstance(meta, dict):
            meta = {}
        return cls(
            html=data.get("html") or "",
            markdown=data.get("markdown") or "",
            content=data.get("content") or "",
            metadata=PageMetadata(
                title=meta.get("title") or "",
                description=meta.get("description") or "",
                language=meta.get("language") or "",
                source_url=meta.get("sourceURL") or meta.get("source_url") or "",
            ),
        )


@dataclass(frozen=True)
class HeadingItem:
    kind: ClassVar[str] = "heading"
    text: str
    level: int
    tag: str


@dataclass(frozen=True)
class TextItem:
    kind: ClassVar[str] = "text"
    text: str


@dataclass(frozen=True)
class ImageItem:
    kind: ClassVar[str] = "image"
    src: str
    alt: str = ""
    width: Optional[str] = None
    height: Optional[str] = None


@dataclass(frozen=True)
class ListItem:
    kind: ClassVar[str] = "list"
    items: Tuple[str, ...]
    ordered: bool = False


@dataclass(frozen=True)
class ButtonItem:
    kind: ClassVar[str] = "button"
    text: str
    href: str = "#"
    style: str = "default"


@dataclass(frozen=True)
class FieldDescriptor:
    type: str
    name: str = ""
    placeholder: str = ""
    required: bool = False


@dataclass(frozen=True)
class FormItem:
    kind: ClassVar[str] = "form"
    action: str
    method: str
    inputs: Tuple[FieldDescriptor, ...]


@dataclass(frozen=True)
class TableItem:
    kind: ClassVar[str] = "table"
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class VideoItem:
    """Video or iframe embed."""
    kind: ClassVar[str] = "video"
    src: str
    width: Optional[str] = None
    height: Optional[str] = None
    tag: str = "video"


@dataclass(frozen=True)
class AudioItem:
    kind: ClassVar[str] = "audio"
    src: str
    markup: str = ""


ContentItem = Union[
    HeadingItem, TextItem, ImageItem, ListItem, ButtonItem,
    FormItem, TableItem, VideoItem, AudioItem,
]


@dataclass(frozen=True)
class LayoutStructure:
    columns: int = 1
    is_grid: bool = False
    is_flex: bool = False
    has_cards: bool = False
    alignment: str = "left"
    layout: str = "single"

    @property
    def is_multi_column(self) -> bool:
        return self.layout == "multi-column" and self.columns > 1


OutputElement = Dict[str, Any]
