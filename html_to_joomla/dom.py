"""Small helpers over BeautifulSoup tags used by every converter stage."""

from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag

# Significance thresholds
SIGNIFICANT_TEXT_LENGTH = 20
MEDIA_SELECTOR = 'video, audio, iframe'
FORM_CONTROL_SELECTOR = 'form, input, textarea, select'
# Leaf tags that count on their own, without text or children
SELF_SIGNIFICANT_SELECTOR = 'img, video, audio, iframe, input, textarea, select'
BLOCK_CONTAINER_TAGS = {'div', 'article', 'section'}


def parse_html(html_content: Optional[str]) -> BeautifulSoup:
    """Parse any string into a document; garbage and empty input give an empty tree."""
    if not isinstance(html_content, str):
        html_content = "" if html_content is None else str(html_content)
    # lxml rejects NUL characters
    return BeautifulSoup(html_content.replace('\x00', ''), 'lxml')


def node_text(elem: Tag) -> str:
    """Visible text of an element with whitespace collapsed at tag boundaries."""
    if not isinstance(elem, Tag):
        return ""
    return elem.get_text(separator=' ', strip=True)


def attr(elem: Tag, name: str, default: str = "") -> str:
    """Attribute as a string; multi-valued attributes are space-joined."""
    if not isinstance(elem, Tag):
        return default
    value = elem.get(name)
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        return ' '.join(str(v) for v in value)
    return str(value)


def optional_attr(elem: Tag, name: str) -> Optional[str]:
    value = attr(elem, name)
    return value or None


def child_tags(elem: Tag) -> List[Tag]:
    """Direct element children, skipping text and comments."""
    if not isinstance(elem, Tag):
        return []
    return [child for child in elem.children if isinstance(child, Tag)]


def contains(ancestor: Tag, elem: Tag) -> bool:
    """True when ``elem`` is ``ancestor`` or sits anywhere below it.

    Tags compare equal by markup in bs4, so identity is used throughout.
    """
    if ancestor is elem:
        return True
    for parent in elem.parents:
        if parent is ancestor:
            return True
    return False


def is_nested(elem: Tag, accepted: Iterable[Tag]) -> bool:
    return any(contains(existing, elem) or contains(elem, existing) for existing in accepted)


def has_significant_content(elem: Tag) -> bool:
    """Enough text, or an image, media element or form control at or below the element."""
    if not isinstance(elem, Tag):
        return False
    if len(node_text(elem)) > SIGNIFICANT_TEXT_LENGTH:
        return True
    if not isinstance(elem, BeautifulSoup) and elem.css.match(SELF_SIGNIFICANT_SELECTOR):
        return True
    if elem.find('img') is not None:
        return True
    if elem.select_one(MEDIA_SELECTOR) is not None:
        return True
    return elem.select_one(FORM_CONTROL_SELECTOR) is not None


def significant_children(elem: Tag, block_only: bool = False) -> List[Tag]:
    children = []
    for child in child_tags(elem):
        if block_only and child.name not in BLOCK_CONTAINER_TAGS:
            continue
        if has_significant_content(child):
            children.append(child)
    return children


def safe_select(root: Tag, selector: str) -> List[Tag]:
    """CSS select below ``root``; non-tags select nothing."""
    if not isinstance(root, Tag):
        return []
    return list(root.select(selector))


def select_with_self(root: Tag, selector: str) -> List[Tag]:
    """Like :func:`safe_select`, with ``root`` first when it matches too."""
    if not isinstance(root, Tag):
        return []
    matches = list(root.select(selector))
    if not isinstance(root, BeautifulSoup) and root.css.match(selector):
        matches.insert(0, root)
    return matches
