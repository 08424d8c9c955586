"""Layout structure inference for a group of section elements."""

from typing import List

from bs4 import Tag

from .class_hints import class_hints, declared_column_count
from .dom import child_tags, significant_children
from .models import LayoutStructure

MIN_COLUMNS = 2
MAX_COLUMNS = 4


def _clamp_columns(count: int) -> int:
    return max(MIN_COLUMNS, min(count, MAX_COLUMNS))


def analyze_layout_structure(elements: List[Tag]) -> LayoutStructure:
    """Infer the column layout of a group from its primary element.

    Framework signals (a bootstrap-style row of ``col-*`` children, or a
    declared ``grid-cols-N``) win over counting significant children.
    """
    if not elements or not isinstance(elements[0], Tag):
        return LayoutStructure()

    primary = elements[0]
    hints = class_hints(primary.get('class', []))
    alignment = "center" if 'centered' in hints else "left"
    has_cards = 'card' in hints

    # Bootstrap-style row with col-* children
    if 'row' in hints:
        column_children = [
            child for child in child_tags(primary)
            if 'column' in class_hints(child.get('class', []))
        ]
        if len(column_children) > 1:
            return LayoutStructure(
                columns=_clamp_columns(len(column_children)),
                is_grid=True,
                is_flex='flex' in hints,
                has_cards=has_cards,
                alignment=alignment,
                layout="multi-column",
            )

    # Declared column count (grid-cols-N, row-cols-N, uk-child-width-1-N)
    declared = declared_column_count(primary.get('class', []))
    if declared is not None and declared > 1:
        return LayoutStructure(
            columns=_clamp_columns(declared),
            is_grid=True,
            is_flex='flex' in hints,
            has_cards=has_cards,
            alignment=alignment,
            layout="multi-column",
        )

    # Generic: several significant block children side by side
    candidates = significant_children(primary, block_only=True)
    if MIN_COLUMNS <= len(candidates) <= MAX_COLUMNS:
        return LayoutStructure(
            columns=len(candidates),
            is_grid='grid' in hints,
            is_flex='flex' in hints,
            has_cards=has_cards or any('card' in class_hints(c.get('class', [])) for c in candidates),
            alignment=alignment,
            layout="multi-column",
        )

    return LayoutStructure(has_cards=has_cards, alignment=alignment)
