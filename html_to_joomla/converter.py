"""
HTML to Joomla / YOOtheme builder converter.

Walks rendered HTML and produces the builder configuration: an ordered list of
section nodes (header first, footer last) plus an asset manifest.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from bs4 import Tag

from .assets import extract_assets
from .discovery import (
    discover_content_elements, extract_body_content, find_footer, find_header,
    group_content_by_visual_sections,
)
from .dom import parse_html
from .extraction import TextIndex, extract_comprehensive_content
from .layout import analyze_layout_structure
from .mapping import (
    build_section, create_footer_section, create_header_section, determine_padding,
    determine_section_style, extract_background_style, organize_content_into_rows,
)
from .models import OutputElement, PageRecord

logger = logging.getLogger(__name__)

JOOMLA_VERSION = "4.3+"
BUILDER_TEMPLATE = "YOOtheme Pro"
BUILDER_VERSION = "3.2+"


class JoomlaConverter:
    """Converts one HTML document into a builder configuration."""

    def __init__(self, html_content: Optional[str]):
        self.soup = parse_html(html_content)
        self.text_index = TextIndex(self.soup)

    def convert(self) -> Dict[str, Any]:
        """Main conversion method."""
        return {
            "joomla_version": JOOMLA_VERSION,
            "builder": {
                "template": BUILDER_TEMPLATE,
                "version": BUILDER_VERSION,
                "sections": self.parse_sections(),
            },
            "assets": extract_assets(self.soup),
        }

    def parse_sections(self) -> List[OutputElement]:
        """Header, discovered content sections, then footer."""
        sections: List[OutputElement] = []

        header = find_header(self.soup)
        if header is not None:
            sections.append(create_header_section(header))

        elements = discover_content_elements(self.soup)
        groups = group_content_by_visual_sections(elements)
        for index, group in enumerate(groups):
            sections.append(self.create_content_section(group, index))

        # Selector discovery found too little; fall back to walking the body
        if len(sections) <= 1:
            body_content = extract_body_content(self.soup)
            if body_content:
                logger.debug("Falling back to body walk with %d elements", len(body_content))
            offset = len(sections)
            for index, elem in enumerate(body_content):
                sections.append(self.create_content_section([elem], index + offset))

        footer = find_footer(self.soup)
        if footer is not None:
            sections.append(create_footer_section(footer))

        logger.debug("Built %d sections", len(sections))
        return sections

    def create_content_section(self, elements: List[Tag], index: int) -> OutputElement:
        content = extract_comprehensive_content(elements, self.text_index)
        structure = analyze_layout_structure(elements)
        rows = organize_content_into_rows(content, structure, elements, self.text_index)

        return build_section(rows, {
            "layout": "default",
            "style": determine_section_style(elements, index),
            "padding": determine_padding(elements),
            "margin": "default",
            "background": extract_background_style(elements),
            "vertical_align": "top",
        })


def convert_html(html_content: Optional[str]) -> Dict[str, Any]:
    return JoomlaConverter(html_content).convert()


def convert(page_record: Union[PageRecord, Dict[str, Any], None]) -> Dict[str, Any]:
    """Convert a fetched page into a builder configuration.

    Accepts a :class:`PageRecord` or the scraper's raw dict payload. Only the
    HTML drives the result; metadata is carried by the record but unused.
    """
    if not isinstance(page_record, PageRecord):
        page_record = PageRecord.from_dict(page_record)
    return convert_html(page_record.html)
