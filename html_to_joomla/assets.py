"""Asset manifest: image paths and the aggregated stylesheet."""

import re
from typing import Dict, List, Union

from bs4 import BeautifulSoup

from .dom import attr, safe_select

MEDIA_PATH_PREFIX = "/media/converted/"
DEFAULT_IMAGE_NAME = "image.jpg"

BACKGROUND_IMAGE_PATTERN = re.compile(r'background-image:\s*url\([\'"]?([^\'")\s]+)[\'"]?\)', re.I)
CSS_URL_PATTERN = re.compile(r'url\([\'"]?([^\'")\s]+)[\'"]?\)', re.I)

COMPATIBILITY_CSS = """/* YOOtheme compatibility styles */
.uk-section { padding: 60px 0; }
.uk-container { max-width: 1200px; margin: 0 auto; padding: 0 15px; }
.uk-grid { display: flex; flex-wrap: wrap; margin-left: -15px; }
.uk-grid > * { padding-left: 15px; }
.uk-width-1-2 { width: 50%; }
.uk-width-1-3 { width: 33.333%; }
.uk-width-1-4 { width: 25%; }
.uk-text-center { text-align: center; }
.uk-margin { margin-bottom: 20px; }
"""


def rewrite_asset_url(url: str) -> str:
    """Point an asset at the converted media folder, keeping only its basename."""
    filename = url.split('/')[-1] or DEFAULT_IMAGE_NAME
    return f"{MEDIA_PATH_PREFIX}{filename}"


def collect_image_urls(soup: BeautifulSoup) -> List[str]:
    """Raw image URLs in discovery order, each once."""
    seen = set()
    urls = []

    def add(url: str):
        if url and url not in seen:
            seen.add(url)
            urls.append(url)

    for img in safe_select(soup, 'img'):
        add(attr(img, 'src'))

    for elem in safe_select(soup, '[style]'):
        style = attr(elem, 'style')
        if 'background-image' not in style.lower():
            continue
        match = BACKGROUND_IMAGE_PATTERN.search(style)
        if match:
            add(match.group(1))

    for style_elem in safe_select(soup, 'style'):
        for url in CSS_URL_PATTERN.findall(style_elem.get_text()):
            add(url)

    return urls


def collect_styles(soup: BeautifulSoup) -> str:
    """Concatenate page CSS and the builder compatibility block."""
    styles = []

    for style_elem in safe_select(soup, 'style'):
        css_text = style_elem.get_text()
        if css_text.strip():
            styles.append(css_text)

    for link in safe_select(soup, 'link[rel~="stylesheet"]'):
        href = attr(link, 'href')
        if href:
            styles.append(f"@import url('{href}');")

    body_style = attr(soup.find('body'), 'style')
    if body_style:
        styles.append(f"body {{ {body_style} }}")

    return (
        "/* Converted from original website */\n"
        + "\n\n".join(styles)
        + "\n\n"
        + COMPATIBILITY_CSS
    )


def extract_assets(soup: BeautifulSoup) -> Dict[str, Union[List[str], str]]:
    return {
        "images": [rewrite_asset_url(url) for url in collect_image_urls(soup)],
        "styles": collect_styles(soup),
    }
