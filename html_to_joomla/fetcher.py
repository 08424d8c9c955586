"""
Firecrawl scraping client.

Fetches and renders a page through the hosted Firecrawl API and hands back a
:class:`FetchResult`. Network and API failures are reported in the result,
never raised, so callers can stop before conversion.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from .config import load_config
from .models import PageRecord

logger = logging.getLogger(__name__)

API_KEY_TEST_URL = "https://example.com"


@dataclass(frozen=True)
class FetchResult:
    success: bool
    data: Optional[PageRecord] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: PageRecord) -> "FetchResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(success=False, error=error)


def is_valid_url(url: str) -> bool:
    """Only absolute http(s) URLs are accepted."""
    if not isinstance(url, str):
        return False
    parsed = urlparse(url.strip())
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


class FirecrawlService:
    """Thin wrapper over the Firecrawl ``/v1/scrape`` endpoint."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else load_config()

    @property
    def api_key(self) -> str:
        return str(self.config.get("api_key") or "").strip()

    def _scrape_payload(self, url: str) -> Dict[str, Any]:
        return {
            "url": url,
            "formats": ["markdown", "html"],
            "waitFor": self.config.get("wait_for", 10000),
            "onlyMainContent": self.config.get("only_main_content", False),
            "includeTags": list(self.config.get("include_tags") or []),
            "excludeTags": list(self.config.get("exclude_tags") or []),
            "removeBase64Images": self.config.get("remove_base64_images", False),
        }

    def _post_scrape(self, url: str, api_key: str) -> FetchResult:
        endpoint = f"{str(self.config.get('api_url', '')).rstrip('/')}/v1/scrape"
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = requests.post(
                endpoint,
                headers=headers,
                json=self._scrape_payload(url),
                timeout=self.config.get("timeout", 60),
            )
        except requests.RequestException as exc:
            logger.warning("Firecrawl request for %s failed: %s", url, exc)
            return FetchResult.failure(str(exc) or "Failed to connect to Firecrawl API")

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            logger.warning("Firecrawl returned a non-JSON body (HTTP %s) for %s", response.status_code, url)
            return FetchResult.failure(f"Failed to scrape website (HTTP {response.status_code})")

        if not response.ok or not payload.get("success"):
            error = payload.get("error") or f"Failed to scrape website (HTTP {response.status_code})"
            logger.warning("Firecrawl scrape of %s failed: %s", url, error)
            return FetchResult.failure(error)

        data = payload.get("data")
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            return FetchResult.failure("Firecrawl response contained no page data")

        return FetchResult.ok(PageRecord.from_dict(data))

    def scrape_website(self, url: str) -> FetchResult:
        """Fetch ``url`` and return the rendered page record."""
        if not is_valid_url(url):
            return FetchResult.failure("Please provide a valid URL (http/https)")
        if not self.api_key:
            return FetchResult.failure("API key not found")
        return self._post_scrape(url.strip(), self.api_key)

    def test_api_key(self, api_key: str) -> bool:
        """Probe ``api_key`` with a one-page scrape."""
        if not api_key or not api_key.strip():
            return False
        return self._post_scrape(API_KEY_TEST_URL, api_key.strip()).success
