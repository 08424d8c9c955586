"""
Content discovery.

Finds the elements of a page that most likely render as visual sections and
groups them into runs bracketed by major structural breaks.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .class_hints import class_hints
from .dom import contains, has_significant_content, is_nested, safe_select

logger = logging.getLogger(__name__)

# Order matters: earlier selectors claim elements before later ones
CONTENT_SELECTORS = [
    'main', 'section', 'article', 'div[class*="section"]', 'div[class*="content"]',
    'div[class*="container"]', 'div[class*="wrapper"]', 'div[class*="row"]',
    'div[id*="section"]', 'div[id*="content"]', '.hero', '.banner', '.feature',
    '.testimonial', '.gallery', '.portfolio', '.about', '.service', '.product',
    'aside', '.sidebar', '.widget', '.block', 'form', 'table', '.card',
    'ul.menu', 'ul.list', 'dl', '.accordion', '.tabs', '.carousel'
]

HEADER_SELECTOR = 'header, nav, .header, .navbar, .nav-menu, [role="banner"]'
FOOTER_SELECTOR = 'footer, .footer, [role="contentinfo"]'

BREAK_TAGS = {'section', 'article', 'main'}
BREAK_HINTS = {'hero', 'banner'}

FALLBACK_CONTENT_TAGS = ['p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'div', 'span', 'article', 'section']
FALLBACK_EXCLUDED_TAGS = ['nav', 'header', 'footer', 'script', 'style']


def discover_content_elements(soup: BeautifulSoup) -> List[Tag]:
    """Collect significant candidates, never nesting two of them.

    Earlier selectors claim elements first; the accepted set is returned in
    document order so grouping sees sections as they appear on the page.
    """
    elements: List[Tag] = []
    for selector in CONTENT_SELECTORS:
        for elem in safe_select(soup, selector):
            if is_nested(elem, elements):
                continue
            if has_significant_content(elem):
                elements.append(elem)

    position = {id(tag): index for index, tag in enumerate(soup.find_all(True))}
    elements.sort(key=lambda elem: position.get(id(elem), 0))
    logger.debug("Discovered %d content elements", len(elements))
    return elements


def is_visual_section_break(elem: Tag, previous: Optional[Tag]) -> bool:
    if previous is None:
        return True
    if elem.name in BREAK_TAGS:
        return True
    return bool(class_hints(elem.get('class', [])) & BREAK_HINTS)


def group_content_by_visual_sections(elements: List[Tag]) -> List[List[Tag]]:
    """Split the flat element list into groups, one per visual section."""
    groups: List[List[Tag]] = []
    current: List[Tag] = []
    previous = None

    for elem in elements:
        if is_visual_section_break(elem, previous) and current:
            groups.append(current)
            current = [elem]
        else:
            current.append(elem)
        previous = elem

    if current:
        groups.append(current)
    return groups


def is_content_element(elem: Tag) -> bool:
    if not isinstance(elem, Tag) or elem.name not in FALLBACK_CONTENT_TAGS:
        return False
    return elem.find_parent(FALLBACK_EXCLUDED_TAGS) is None


def extract_body_content(soup: BeautifulSoup) -> List[Tag]:
    """Every significant content tag in the body, in document order."""
    body = soup.find('body')
    if not isinstance(body, Tag):
        return []
    return [
        elem for elem in body.find_all(True)
        if is_content_element(elem) and has_significant_content(elem)
    ]


def find_header(soup: BeautifulSoup) -> Optional[Tag]:
    matches = safe_select(soup, HEADER_SELECTOR)
    return matches[0] if matches else None


def find_footer(soup: BeautifulSoup) -> Optional[Tag]:
    matches = safe_select(soup, FOOTER_SELECTOR)
    return matches[0] if matches else None


def is_antichain(elements: List[Tag]) -> bool:
    """True when no element in the list contains another."""
    for i, first in enumerate(elements):
        for second in elements[i + 1:]:
            if contains(first, second) or contains(second, first):
                return False
    return True
