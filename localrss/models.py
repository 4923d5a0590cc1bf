"""Data models for localrss."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Article:
    """Canonical article record built from one RSS item or Atom entry."""

    title: str
    description: str  # HTML stripped, capped at 200 characters
    content: str  # original HTML
    link: str
    pub_date: str
    author: str
    categories: tuple[str, ...] = ()
    image_url: str = ""
    saved_date: str = ""


@dataclass(frozen=True)
class TemplateData:
    """Values substituted into the content template."""

    title: str
    link: str
    author: str
    published_time: str
    saved_time: str
    image: str
    description: str
    description_short: str
    tags: str
    content: str


@dataclass
class ParsedFeed:
    """A feed document split into its format, display title and raw items."""

    kind: str  # "rss" or "atom"
    title: str
    items: list[Any] = field(default_factory=list)


class WriteOutcome(Enum):
    """Result of persisting one article."""

    WRITTEN = "written"
    SKIPPED = "skipped"
