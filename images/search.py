# SPDX-License-Identifier: AGPL-3.0-only

"""
Best-effort image search through DuckDuckGo's public image endpoint.

This uses an unofficial endpoint: it needs a vqd token scraped from the search
page and can stop working at any time, so every failure maps to an empty list.
"""
import re
from typing import List, Optional
from urllib.parse import quote

import requests

from common.config import Settings, get_settings
from common.log import get_logger

logger = get_logger(__name__)

SEARCH_PAGE_URL = "https://duckduckgo.com/?q={query}&iax=images&ia=images"
IMAGES_JSON_URL = "https://duckduckgo.com/i.js?l=us-en&o=json&q={query}&vqd={vqd}"
USER_AGENT = "Mozilla/5.0"

VQD_PATTERN = re.compile(r"vqd='([\d-]+)'")


class ImageSearchClient:
    """Looks up illustrative image URLs for a free-text query."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.limit = settings.image_search_limit
        self.timeout = settings.image_search_timeout
        self.headers = {"User-Agent": USER_AGENT}

    def _fetch_vqd(self, encoded_query: str) -> Optional[str]:
        resp = requests.get(
            SEARCH_PAGE_URL.format(query=encoded_query),
            headers=self.headers,
            timeout=self.timeout
        )
        match = VQD_PATTERN.search(resp.text)
        return match.group(1) if match else None

    def search(self, query: str) -> List[str]:
        """Return up to `limit` image URLs; an empty list on any failure."""
        if not query:
            return []

        encoded = quote(query, safe="")
        try:
            vqd = self._fetch_vqd(encoded)
            if not vqd:
                logger.info("Image search token not found for query %r", query[:80])
                return []

            resp = requests.get(
                IMAGES_JSON_URL.format(query=encoded, vqd=vqd),
                headers=self.headers,
                timeout=self.timeout
            )
            results = resp.json().get("results") or []
            images = [item.get("image") for item in results[:self.limit] if isinstance(item, dict)]
            return [url for url in images if isinstance(url, str) and url]
        except (requests.exceptions.RequestException, ValueError, AttributeError) as e:
            logger.warning("Image fetch error: %s", e)
            return []
