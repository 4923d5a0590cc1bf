"""Conversion of raw RSS items and Atom entries into Article records."""

from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from .config import FeedConfig, Settings
from .html_utils import strip_html
from .images import ImageExtractor
from .logging_config import create_execution_logger
from .models import Article
from .normalize import (
    as_list,
    normalize_atom_author,
    normalize_atom_link,
    normalize_value,
)

DESCRIPTION_MAX_LENGTH = 200


def now_iso() -> str:
    return datetime.now().astimezone().isoformat()


def parse_date(value: str | None) -> datetime | None:
    """Parse a feed or front matter date; naive values are local time."""
    if not value:
        return None
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def category_text(category: Any) -> str:
    if category is None:
        return ""
    if isinstance(category, str):
        return category.strip()
    if isinstance(category, dict):
        text = category.get("_")
        if isinstance(text, str):
            return text.strip()
        term = category.get("term")
        if isinstance(term, str):
            return term.strip()
        wrapped = category.get("$")
        if isinstance(wrapped, dict) and isinstance(wrapped.get("term"), str):
            return wrapped["term"].strip()
    return ""


def normalize_categories(categories: Any) -> list[str]:
    """Flatten category elements to non-empty strings, keeping order and repeats."""
    texts = (category_text(category) for category in as_list(categories))
    return [text for text in texts if text]


class FeedItemProcessor:
    """Builds Article records from parsed feed items."""

    def __init__(
        self,
        image_extractor: ImageExtractor,
        settings: Settings,
        execution_id: str | None = None,
    ):
        self.image_extractor = image_extractor
        self.settings = settings
        self.logger = create_execution_logger("feed_processor", execution_id)

    def process_rss_item(self, item: Any, feed: FeedConfig) -> Article:
        """Normalize one RSS ``<item>``."""
        if not isinstance(item, dict):
            item = {}

        description = normalize_value(item.get("description"))
        link = normalize_value(item.get("link"))

        article = Article(
            title=normalize_value(item.get("title")) or "Untitled",
            description=strip_html(description, DESCRIPTION_MAX_LENGTH),
            content=normalize_value(item.get("content:encoded")) or description,
            link=link,
            pub_date=normalize_value(item.get("pubDate"))
            or normalize_value(item.get("published"))
            or now_iso(),
            author=normalize_value(item.get("author"))
            or normalize_value(item.get("dc:creator"))
            or feed.name,
            categories=tuple(normalize_categories(item.get("category"))),
            image_url=self._resolve_image(item, link),
            saved_date=now_iso(),
        )
        self.logger.debug(
            "Processed RSS item", article_title=article.title, feed_name=feed.name
        )
        return article

    def process_atom_item(self, entry: Any, feed_title: str, feed: FeedConfig) -> Article:
        """Normalize one Atom ``<entry>``."""
        if not isinstance(entry, dict):
            entry = {}

        summary = normalize_value(entry.get("summary"))
        content = normalize_value(entry.get("content"))
        link = normalize_atom_link(entry.get("link"))

        article = Article(
            title=normalize_value(entry.get("title")) or "Untitled",
            description=strip_html(summary, DESCRIPTION_MAX_LENGTH),
            content=content or summary,
            link=link,
            pub_date=normalize_value(entry.get("published"))
            or normalize_value(entry.get("updated"))
            or now_iso(),
            author=normalize_atom_author(entry.get("author"), feed_title) or feed.name,
            categories=tuple(normalize_categories(entry.get("category"))),
            image_url=self._resolve_image(entry, link),
            saved_date=now_iso(),
        )
        self.logger.debug(
            "Processed Atom entry", article_title=article.title, feed_name=feed.name
        )
        return article

    def _resolve_image(self, item: dict, link: str) -> str:
        if not self.settings.include_images:
            return ""

        image_url = self.image_extractor.extract_from_item(item)
        if not image_url and self.settings.fetch_image_from_link and link:
            image_url = self.image_extractor.fetch_from_url(link)
        return image_url
