"""
Content extraction.

Turns a group of section elements into an ordered list of typed content items.
Each element is scanned kind by kind (headings first, media last), so the
order inside a section follows content type before document position.
"""

from typing import Dict, List, Optional, Set

from bs4 import Tag

from .class_hints import button_style
from .dom import attr, node_text, optional_attr, safe_select, select_with_self
from .models import (
    AudioItem, ButtonItem, ContentItem, FieldDescriptor, FormItem, HeadingItem,
    ImageItem, ListItem, TableItem, TextItem, VideoItem,
)

HEADING_SELECTOR = 'h1, h2, h3, h4, h5, h6'
TEXT_TAGS = ['p', 'div', 'span']
TEXT_SELECTOR = ', '.join(TEXT_TAGS)
TEXT_MIN_LENGTH = 15
# A text node holding any of these belongs to a richer item (card, media, CTA)
TEXT_EXCLUDED_TAGS = {'img', 'video', 'iframe', 'button', 'a'}
BUTTON_SELECTOR = 'button, a[class*="btn"], .button, input[type="submit"]'
FIELD_SELECTOR = 'input, textarea, select'
MEDIA_SELECTOR = 'video, audio, iframe'


class TextIndex:
    """Which ``p``/``div``/``span`` nodes under ``root`` become text items.

    A node qualifies when its text is longer than ``TEXT_MIN_LENGTH`` and no
    image, media, button or link sits below it. Of a nested chain of
    qualifying nodes only the innermost one is emitted, so a paragraph
    wrapped in divs is counted once. The index is built in one bottom-up pass
    and shared by every group of the same document.
    """

    def __init__(self, root: Tag):
        self.root = root
        self._texts: Dict[int, str] = {}
        self._shadowed: Set[int] = set()
        if isinstance(root, Tag):
            self._index([root] + root.find_all(True))

    def _index(self, tags: List[Tag]):
        holds_excluded: Set[int] = set()
        # Reverse document order visits every descendant before its ancestors
        for tag in reversed(tags):
            for child in tag.children:
                if isinstance(child, Tag) and (child.name in TEXT_EXCLUDED_TAGS or id(child) in holds_excluded):
                    holds_excluded.add(id(tag))
                    break

            if tag.name not in TEXT_TAGS or id(tag) in holds_excluded or id(tag) in self._shadowed:
                continue
            text = node_text(tag)
            if len(text) <= TEXT_MIN_LENGTH:
                continue
            self._texts[id(tag)] = text
            for parent in tag.parents:
                if id(parent) in self._shadowed:
                    break
                self._shadowed.add(id(parent))

    def text_items(self, elem: Tag) -> List[ContentItem]:
        return [
            TextItem(text=self._texts[id(node)])
            for node in select_with_self(elem, TEXT_SELECTOR)
            if id(node) in self._texts
        ]


def extract_headings(elem: Tag) -> List[ContentItem]:
    items = []
    for heading in select_with_self(elem, HEADING_SELECTOR):
        items.append(HeadingItem(
            text=node_text(heading),
            level=int(heading.name[1]),
            tag=heading.name,
        ))
    return items


def extract_images(elem: Tag) -> List[ContentItem]:
    return [
        ImageItem(
            src=attr(img, 'src'),
            alt=attr(img, 'alt'),
            width=optional_attr(img, 'width'),
            height=optional_attr(img, 'height'),
        )
        for img in select_with_self(elem, 'img')
    ]


def extract_lists(elem: Tag) -> List[ContentItem]:
    items = []
    for list_elem in select_with_self(elem, 'ul, ol'):
        entries = tuple(node_text(li) for li in list_elem.find_all('li'))
        if entries:
            items.append(ListItem(items=entries, ordered=list_elem.name == 'ol'))
    return items


def _button_label(button: Tag) -> str:
    if button.name == 'input':
        return attr(button, 'value').strip()
    return node_text(button)


def extract_buttons(elem: Tag) -> List[ContentItem]:
    items = []
    for button in select_with_self(elem, BUTTON_SELECTOR):
        label = _button_label(button)
        if not label:
            continue
        items.append(ButtonItem(
            text=label,
            href=attr(button, 'href') or attr(button, 'data-href') or "#",
            style=button_style(button.get('class', [])),
        ))
    return items


def extract_forms(elem: Tag) -> List[ContentItem]:
    items = []
    for form in select_with_self(elem, 'form'):
        fields = tuple(
            FieldDescriptor(
                type=attr(field, 'type') or field.name,
                name=attr(field, 'name'),
                placeholder=attr(field, 'placeholder'),
                required=field.has_attr('required'),
            )
            for field in safe_select(form, FIELD_SELECTOR)
        )
        if fields:
            items.append(FormItem(
                action=attr(form, 'action'),
                method=attr(form, 'method') or "post",
                inputs=fields,
            ))
    return items


def _body_rows(table: Tag) -> List[Tag]:
    # lxml does not insert an implicit <tbody>, so take every row outside thead/tfoot
    return [
        tr for tr in table.find_all('tr')
        if tr.find_parent(['thead', 'tfoot']) is None and tr.find('td') is not None
    ]


def extract_tables(elem: Tag) -> List[ContentItem]:
    items = []
    for table in select_with_self(elem, 'table'):
        headers = tuple(node_text(th) for th in table.find_all('th'))
        rows = tuple(
            tuple(node_text(td) for td in tr.find_all('td'))
            for tr in _body_rows(table)
        )
        if headers or rows:
            items.append(TableItem(headers=headers, rows=rows))
    return items


def extract_media(elem: Tag) -> List[ContentItem]:
    items = []
    for media in select_with_self(elem, MEDIA_SELECTOR):
        src = attr(media, 'src')
        if not src:
            # <video><source src=...></video>
            source = media.find('source')
            src = attr(source, 'src') if isinstance(source, Tag) else ""
        if media.name == 'audio':
            items.append(AudioItem(src=src, markup=str(media)))
        else:
            items.append(VideoItem(
                src=src,
                width=optional_attr(media, 'width'),
                height=optional_attr(media, 'height'),
                tag=media.name,
            ))
    return items


# Run after headings and text
EXTRACTORS = [
    extract_images,
    extract_lists,
    extract_buttons,
    extract_forms,
    extract_tables,
    extract_media,
]


def extract_comprehensive_content(elements: List[Tag],
                                  text_index: Optional[TextIndex] = None) -> List[ContentItem]:
    """Typed content items for a group, element by element, kind by kind.

    Each element is matched itself as well as its descendants, so a group
    that is a bare ``<p>`` or ``<img>`` still yields its item. Pass the
    document's :class:`TextIndex` when converting many groups of one page.
    """
    content: List[ContentItem] = []
    for elem in elements:
        if not isinstance(elem, Tag):
            continue
        index = text_index if text_index is not None else TextIndex(elem)
        content.extend(extract_headings(elem))
        content.extend(index.text_items(elem))
        for extractor in EXTRACTORS:
            content.extend(extractor(elem))
    return content
