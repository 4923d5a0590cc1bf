"""Unit tests for feed document parsing."""

import pytest

from localrss.rss import (
    FeedParseError,
    UnsupportedFeedError,
    parse_feed_document,
    parse_xml,
)

from .feeds import ATOM_FEED, RSS_FEED, RSS_NO_ITEMS, RSS_SINGLE_ITEM, UNSUPPORTED_FEED


class TestParseFeedDocument:
    """Tests for RSS/Atom branching."""

    def test_rss_2_0(self):
        parsed = parse_feed_document(RSS_FEED)

        assert parsed.kind == "rss"
        assert parsed.title == "Example Blog"
        assert len(parsed.items) == 2

        first = parsed.items[0]
        assert first["title"] == "First Post"
        assert first["dc:creator"] == "Jane Doe"
        assert first["content:encoded"].startswith("<p>Hello")
        assert first["media:content"]["url"] == "https://cdn.example.com/first.jpg"
        assert first["category"][0] == "tech"
        assert first["category"][1]["_"] == "news"

    def test_single_rss_item_becomes_list(self):
        parsed = parse_feed_document(RSS_SINGLE_ITEM)

        assert parsed.kind == "rss"
        assert len(parsed.items) == 1
        assert parsed.items[0]["category"] == "solo"

    def test_rss_without_items(self):
        parsed = parse_feed_document(RSS_NO_ITEMS)
        assert parsed.kind == "rss"
        assert parsed.items == []

    def test_atom_1_0(self):
        parsed = parse_feed_document(ATOM_FEED)

        assert parsed.kind == "atom"
        assert parsed.title == "Atom Example"
        assert len(parsed.items) == 2

        entry = parsed.items[0]
        assert entry["link"][0]["href"] == "https://atom.example.com/entry"
        assert entry["title"]["_"] == "Atom Entry"
        assert entry["category"] == [{"term": "tech"}, {"term": "life"}]

    def test_unsupported(self):
        with pytest.raises(UnsupportedFeedError):
            parse_feed_document(UNSUPPORTED_FEED)

    def test_atom_without_entries_unsupported(self):
        with pytest.raises(UnsupportedFeedError):
            parse_feed_document('<feed xmlns="http://www.w3.org/2005/Atom"><title>x</title></feed>')

    def test_malformed_xml(self):
        with pytest.raises(FeedParseError):
            parse_xml("<rss><channel>")
