"""RSS/Atom document parsing."""

from xml.parsers.expat import ExpatError

import xmltodict

from .models import ParsedFeed
from .normalize import as_list, normalize_value


class FeedParseError(ValueError):
    """Raised when a feed document is not well-formed XML."""


class UnsupportedFeedError(ValueError):
    """Raised when a document is neither an RSS channel nor an Atom feed."""


def parse_xml(xml: str) -> dict:
    """Parse XML into nested dicts without forcing repeated-element lists.

    Attributes become plain keys and element text next to attributes is
    stored under ``_``.
    """
    try:
        return xmltodict.parse(xml, attr_prefix="", cdata_key="_")
    except ExpatError as e:
        raise FeedParseError(f"Invalid feed XML: {e}") from e


def parse_feed_document(xml: str) -> ParsedFeed:
    """Split a feed document into its format, title and raw items.

    Raises:
        FeedParseError: If the XML is malformed
        UnsupportedFeedError: If there is no RSS channel and no Atom entry
    """
    document = parse_xml(xml)

    rss = document.get("rss")
    channel = rss.get("channel") if isinstance(rss, dict) else None
    if isinstance(channel, list):
        channel = channel[0] if channel else None
    if isinstance(channel, dict):
        return ParsedFeed(
            kind="rss",
            title=normalize_value(channel.get("title")),
            items=[item for item in as_list(channel.get("item")) if item is not None],
        )

    atom = document.get("feed")
    if isinstance(atom, dict) and atom.get("entry"):
        return ParsedFeed(
            kind="atom",
            title=normalize_value(atom.get("title")),
            items=[entry for entry in as_list(atom.get("entry")) if entry is not None],
        )

    raise UnsupportedFeedError("Unsupported feed format")
