"""Image URL extraction for feed items."""

import re
from typing import Any
from urllib.parse import urljoin, urlparse

from .fetcher import FeedFetcher
from .logging_config import create_execution_logger
from .normalize import attribute, normalize_value

IMAGE_EXTENSION = re.compile(r"\.(jpg|jpeg|png|gif|webp)(\?|$)", re.IGNORECASE)
IMAGE_HOSTS = ("cloudinary.com", "imgur.com", "googleusercontent.com")
EMBEDDED_IMAGE = re.compile(r"<img.*?src=[\"'](.*?)[\"']")

META_IMAGE_PATTERNS = [
    re.compile(
        r"<meta\s+property=[\"']og:image[\"']\s+content=[\"'](.*?)[\"']", re.IGNORECASE
    ),
    re.compile(
        r"<meta\s+content=[\"'](.*?)[\"']\s+property=[\"']og:image[\"']", re.IGNORECASE
    ),
    re.compile(
        r"<meta\s+name=[\"']twitter:image[\"']\s+content=[\"'](.*?)[\"']",
        re.IGNORECASE,
    ),
    re.compile(
        r"<meta\s+content=[\"'](.*?)[\"']\s+name=[\"']twitter:image[\"']",
        re.IGNORECASE,
    ),
]


def is_image_url(url: str) -> bool:
    """Guess from the URL alone whether it points at an image."""
    if IMAGE_EXTENSION.search(url):
        return True
    netloc = urlparse(url).netloc.lower()
    return any(host in netloc for host in IMAGE_HOSTS)


def _media_url(node: Any) -> str:
    """Resolve a media element given as a plain URL or an attribute object."""
    if isinstance(node, list):
        node = node[0] if node else None
    if isinstance(node, str):
        return node
    return attribute(node, "url")


class ImageExtractor:
    """Finds a representative image for a feed item.

    Structured media elements are trusted first, then the first <img> in the
    item's HTML. Fetching the article page for Open Graph / Twitter Card
    metadata is a separate, explicit step.
    """

    def __init__(self, fetcher: FeedFetcher, execution_id: str | None = None):
        self.fetcher = fetcher
        self.logger = create_execution_logger("image_extractor", execution_id)

    def extract_from_item(self, item: Any) -> str:
        """Return the best image URL found in the item itself, or ""."""
        if not isinstance(item, dict):
            return ""
        try:
            return self._from_media_elements(item) or self._from_html_content(item)
        except (AttributeError, TypeError, ValueError) as e:
            self.logger.warning(f"Could not extract image from item: {e}", error=str(e))
            return ""

    def _from_media_elements(self, item: dict) -> str:
        for key in ("media:content", "media:thumbnail"):
            url = _media_url(item.get(key))
            if url:
                return url

        enclosure = item.get("enclosure")
        if isinstance(enclosure, list):
            enclosure = enclosure[0] if enclosure else None
        url = _media_url(enclosure)
        if url:
            if is_image_url(url):
                return url
            if attribute(enclosure, "type").startswith("image/"):
                return url

        return ""

    def _from_html_content(self, item: dict) -> str:
        if "content:encoded" in item or "description" in item:
            html = normalize_value(item.get("content:encoded")) or normalize_value(
                item.get("description")
            )
        else:
            html = normalize_value(item.get("content")) or normalize_value(
                item.get("summary")
            )

        if not html:
            return ""

        match = EMBEDDED_IMAGE.search(html)
        if match and match.group(1):
            return match.group(1)
        return ""

    def fetch_from_url(self, url: str) -> str:
        """Scrape og:image / twitter:image from the page at ``url``.

        Never raises; any failure resolves to "".
        """
        try:
            html = self.fetcher.fetch_html(url)
            if not html:
                return ""

            image_url = ""
            for pattern in META_IMAGE_PATTERNS:
                match = pattern.search(html)
                if match and match.group(1):
                    image_url = match.group(1)
                    break

            if not image_url:
                return ""

            # Covers root-relative and protocol-relative ("//cdn/...") URLs.
            if image_url.startswith("/"):
                image_url = urljoin(url, image_url)

            self.logger.debug("Found page image", feed_url=url, image_url=image_url)
            return image_url
        except Exception as e:
            self.logger.error(
                f"Error parsing OGP image from {url}: {e}", feed_url=url, error=str(e)
            )
            return ""
