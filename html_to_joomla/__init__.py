"""Convert rendered website HTML into Joomla / YOOtheme page-builder JSON."""

from .converter import JoomlaConverter, convert, convert_html
from .fetcher import FetchResult, FirecrawlService
from .models import PageMetadata, PageRecord

__all__ = [
    "JoomlaConverter",
    "convert",
    "convert_html",
    "FetchResult",
    "FirecrawlService",
    "PageMetadata",
    "PageRecord",
]
