"""
Class-name sniffing.

Pure string predicates over an element's ``class`` value. Nothing here touches
the parse tree, so the heuristics can be exercised with plain strings.
"""

import re
from typing import FrozenSet, Iterable, Optional, Union

ClassValue = Union[str, Iterable[str], None]

# Substring patterns that map onto a semantic hint
HINT_PATTERNS = {
    'hero': ['hero', 'jumbotron'],
    'banner': ['banner'],
    'grid': ['grid'],
    'flex': ['flex'],
    'card': ['card', 'panel'],
}

ROW_TOKEN = re.compile(r'(?:^|[-_:])rows?(?:$|[-_])')
COLUMN_TOKEN = re.compile(r'^(?:[a-z]+:)?col(?:umn)?s?(?:$|-)')
CENTER_TOKENS = {
    'text-center', 'justify-center', 'items-center', 'justify-content-center',
    'align-items-center', 'uk-text-center', 'uk-flex-center', 'center', 'centered'
}

# Explicit column counts declared on a container
COLUMN_COUNT_PATTERNS = [
    re.compile(r'(?:^|:)grid-cols-(\d+)$'),
    re.compile(r'^row-cols-(?:[a-z]+-)?(\d+)$'),
    re.compile(r'^uk-child-width-1-(\d+)(?:@[a-z]+)?$'),
    re.compile(r'^columns?-(\d+)$'),
]

BACKGROUND_PREFIXES = ['bg-', 'background-', 'section-']


def class_tokens(class_value: ClassValue) -> list:
    """Normalise a class attribute (string or bs4 list) into lowercase tokens."""
    if not class_value:
        return []
    if isinstance(class_value, str):
        parts = class_value.split()
    else:
        parts = []
        for value in class_value:
            parts.extend(str(value).split())
    return [p.lower() for p in parts if p]


def class_string(class_value: ClassValue) -> str:
    return ' '.join(class_tokens(class_value))


def class_hints(class_value: ClassValue) -> FrozenSet[str]:
    """Map a class attribute onto the set of semantic hints it carries."""
    tokens = class_tokens(class_value)
    if not tokens:
        return frozenset()

    joined = ' '.join(tokens)
    hints = set()
    for hint, patterns in HINT_PATTERNS.items():
        if any(pattern in joined for pattern in patterns):
            hints.add(hint)

    for token in tokens:
        if ROW_TOKEN.search(token):
            hints.add('row')
        if COLUMN_TOKEN.search(token):
            hints.add('column')
        if token in CENTER_TOKENS:
            hints.add('centered')

    return frozenset(hints)


def declared_column_count(class_value: ClassValue) -> Optional[int]:
    """Column count spelled out by a grid framework class, if any."""
    best = None
    for token in class_tokens(class_value):
        for pattern in COLUMN_COUNT_PATTERNS:
            match = pattern.search(token)
            if match:
                count = int(match.group(1))
                best = count if best is None else max(best, count)
    return best


def button_style(class_value: ClassValue) -> str:
    """Pick a builder button style from class names (first match wins)."""
    joined = class_string(class_value)
    if 'primary' in joined or 'main' in joined:
        return "primary"
    if 'secondary' in joined:
        return "secondary"
    if 'outline' in joined:
        return "outline"
    if 'ghost' in joined:
        return "text"
    return "default"


def background_style(class_value: ClassValue) -> Optional[str]:
    """Background tone from bg-/background-/section- classes."""
    joined = class_string(class_value)
    if not any(prefix in joined for prefix in BACKGROUND_PREFIXES):
        return None
    if 'dark' in joined:
        return "dark"
    if 'light' in joined:
        return "light"
    if 'primary' in joined:
        return "primary"
    return None
