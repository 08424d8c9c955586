"""
Builder element mapping.

Maps content items onto page-builder elements and assembles them into
section, row and column nodes. Output nodes are plain dicts of the form
``{"type": ..., "props": {...}, "children": [...]}``; leaves carry no
``children`` key.
"""

import html
from typing import Any, Dict, List, Optional

from bs4 import Tag

from .class_hints import background_style, class_hints
from .dom import node_text, significant_children
from .extraction import TextIndex, extract_comprehensive_content
from .models import ContentItem, LayoutStructure, OutputElement

COLUMN_WIDTHS = {
    1: "100%",
    2: "50%",
    3: "33.3%",
    4: "25%",
}

LARGE_TEXT_LENGTH = 500
LARGE_MEDIA_COUNT = 2
SECTION_HERO_HINTS = {'hero', 'banner'}

# Embed size when the source tag declares none
DEFAULT_VIDEO_WIDTH = "1920"
DEFAULT_VIDEO_HEIGHT = "1080"


def column_width(column_count: int) -> str:
    return COLUMN_WIDTHS.get(column_count, COLUMN_WIDTHS[1])


def _element(element_type: str, props: Dict[str, Any],
             children: Optional[List[OutputElement]] = None) -> OutputElement:
    node = {"type": element_type, "props": props}
    if children is not None:
        node["children"] = children
    return node


def _render_form(item) -> str:
    fields = []
    for field in item.inputs:
        required = " required" if field.required else ""
        fields.append(
            f'<div class="uk-margin"><input class="uk-input" type="{html.escape(field.type)}" '
            f'name="{html.escape(field.name)}" placeholder="{html.escape(field.placeholder)}"{required}></div>'
        )
    return (
        f'<form action="{html.escape(item.action)}" method="{html.escape(item.method)}">\n'
        + '\n'.join(fields)
        + '\n<button class="uk-button uk-button-primary" type="submit">Submit</button>\n</form>'
    )


def convert_content_to_element(item: ContentItem) -> OutputElement:
    """Map one content item onto its builder element."""
    kind = getattr(item, 'kind', None)

    if kind == "heading":
        return _element("heading", {
            "content": item.text,
            "heading_element": item.tag,
            "heading_style": "h1" if item.level <= 2 else "default",
            "margin": "default",
        })

    if kind == "text":
        return _element("text", {
            "content": item.text,
            "margin": "default",
        })

    if kind == "image":
        return _element("image", {
            "image": item.src,
            "image_alt": item.alt,
            "image_width": item.width or "auto",
            "image_height": item.height or "auto",
            "border_radius": "default",
            "margin": "default",
        })

    if kind == "list":
        return _element("list", {
            "list_style": "decimal" if item.ordered else "disc",
            "content": [{"content": entry} for entry in item.items],
            "margin": "default",
        })

    if kind == "button":
        return _element("button", {
            "content": item.text,
            "link": item.href,
            "style": item.style,
            "size": "default",
            "margin": "default",
        })

    if kind == "form":
        return _element("html", {
            "content": _render_form(item),
            "margin": "default",
        })

    if kind == "table":
        return _element("table", {
            "table_style": "striped",
            "content": {
                "head": [list(item.headers)] if item.headers else [],
                "body": [list(row) for row in item.rows],
            },
            "margin": "default",
        })

    if kind == "video":
        return _element("video", {
            "video": item.src,
            "video_width": item.width or DEFAULT_VIDEO_WIDTH,
            "video_height": item.height or DEFAULT_VIDEO_HEIGHT,
            "margin": "default",
        })

    # Anything else passes through as raw markup
    return _element("html", {
        "content": getattr(item, 'markup', '') or getattr(item, 'text', '') or '',
        "margin": "default",
    })


def _column(children: List[OutputElement], column_count: int, alignment: str) -> OutputElement:
    return _element("column", {
        "width": column_width(column_count),
        "alignment": alignment,
    }, children)


def organize_content_into_rows(content: List[ContentItem], structure: LayoutStructure,
                               original_elements: List[Tag],
                               text_index: Optional[TextIndex] = None) -> List[Dict[str, Any]]:
    """Arrange items into rows of columns.

    Structural mapping is used when the container's significant children line
    up one-to-one with the inferred columns; otherwise items are chunked
    ``columns`` at a time; a single-column layout gets one full-width column.
    """
    gap = "large" if structure.is_grid else "default"
    alignment = "center" if structure.is_flex else "stretch"

    if structure.columns > 1 and original_elements and isinstance(original_elements[0], Tag):
        column_elements = significant_children(original_elements[0])
        if len(column_elements) == structure.columns:
            columns = []
            for column_elem in column_elements:
                column_content = extract_comprehensive_content([column_elem], text_index)
                columns.append(_column(
                    [convert_content_to_element(item) for item in column_content],
                    structure.columns,
                    structure.alignment,
                ))
            rows = [{"columns": columns, "gap": gap, "alignment": alignment}]

            # The rest of the group follows as one full-width row
            rest = extract_comprehensive_content(original_elements[1:], text_index)
            if rest:
                rows.append({
                    "columns": [_column(
                        [convert_content_to_element(item) for item in rest],
                        1,
                        structure.alignment,
                    )],
                    "gap": "default",
                    "alignment": "stretch",
                })
            return rows

    if structure.columns > 1 and content:
        rows = []
        for start in range(0, len(content), structure.columns):
            row_content = content[start:start + structure.columns]
            rows.append({
                "columns": [
                    _column([convert_content_to_element(item)], len(row_content), structure.alignment)
                    for item in row_content
                ],
                "gap": gap,
                "alignment": alignment,
            })
        return rows

    return [{
        "columns": [_column(
            [convert_content_to_element(item) for item in content],
            1,
            structure.alignment,
        )],
        "gap": "default",
        "alignment": "stretch",
    }]


def determine_section_style(elements: List[Tag], index: int) -> str:
    """Hero sections stand out; the rest alternate for visual rhythm."""
    for elem in elements:
        if class_hints(elem.get('class', [])) & SECTION_HERO_HINTS:
            return "primary"
    if index == 0:
        return "default"
    if index % 2 == 0:
        return "muted"
    return "default"


def determine_padding(elements: List[Tag]) -> str:
    for elem in elements:
        if len(node_text(elem)) > LARGE_TEXT_LENGTH:
            return "large"
        if len(elem.select('img, video')) > LARGE_MEDIA_COUNT:
            return "large"
    return "default"


def extract_background_style(elements: List[Tag]) -> str:
    for elem in elements:
        tone = background_style(elem.get('class', []))
        if tone:
            return tone
    return "default"


def build_section(rows: List[Dict[str, Any]], props: Dict[str, Any]) -> OutputElement:
    """Wrap organised rows into a section node."""
    children = [
        _element("row", {
            "gap": row.get("gap", "default"),
            "alignment": row.get("alignment", "stretch"),
        }, row["columns"])
        for row in rows
    ]
    return _element("section", props, children)


def _link_items(root: Tag) -> List[Dict[str, str]]:
    return [
        {"text": node_text(link), "href": link.get('href') or "#"}
        for link in root.find_all('a')
    ]


def create_header_section(header: Tag) -> OutputElement:
    nav = header.find('nav') or header
    nav_element = _element("nav", {
        "items": _link_items(nav),
        "style": "default",
        "alignment": "left",
        "margin": "default",
    })
    return build_section(
        [{"columns": [_column([nav_element], 1, "left")]}],
        {
            "layout": "default",
            "style": "primary",
            "padding": "default",
            "vertical_align": "middle",
        },
    )


def create_footer_section(footer: Tag) -> OutputElement:
    children = [_element("text", {
        "content": node_text(footer),
        "text_align": "center",
        "margin": "default",
    })]
    links = _link_items(footer)
    if links:
        children.append(_element("nav", {
            "items": links,
            "style": "footer",
            "alignment": "center",
            "margin": "default",
        }))
    return build_section(
        [{"columns": [_column(children, 1, "center")]}],
        {
            "layout": "default",
            "style": "secondary",
            "padding": "default",
            "vertical_align": "top",
        },
    )
