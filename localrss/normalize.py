"""Normalization of xmltodict output into plain strings.

The XML parser keeps single elements as scalars and repeated elements as
lists, and an element that carries attributes becomes a dict with its text
under ``_``. Attributes show up either directly on that dict or, for data
produced by other converters, wrapped under ``$``. Every function here is
total: bad shapes resolve to ``""``.
"""

from typing import Any


def as_list(value: Any) -> list[Any]:
    """Return ``value`` as a list; ``None`` becomes an empty list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def normalize_value(value: Any) -> str:
    """Collapse a string or ``{"_": text}`` wrapper into a string."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and "_" in value:
        text = value["_"]
        return text if isinstance(text, str) else ""
    return ""


def attribute(node: Any, name: str) -> str:
    """Read attribute ``name`` from a node in either attribute encoding.

    The ``$``-wrapped form is tried first, then the direct form.
    """
    if not isinstance(node, dict):
        return ""
    wrapped = node.get("$")
    if isinstance(wrapped, dict) and name in wrapped:
        value = wrapped[name]
        return value if isinstance(value, str) else ""
    value = node.get(name)
    return value if isinstance(value, str) else ""


def normalize_atom_link(link: Any) -> str:
    """Resolve an Atom ``<link>`` (or list of them) to the first URL."""
    if not link:
        return ""
    first = link[0] if isinstance(link, list) else link
    if not first:
        return ""
    if isinstance(first, str):
        return first
    return attribute(first, "href")


def normalize_atom_author(author: Any, feed_title: str | None = None) -> str:
    """Return the first author's name, else the feed title, else ``""``."""
    fallback = feed_title or ""
    if not author:
        return fallback
    first = author[0] if isinstance(author, list) else author
    if isinstance(first, dict):
        return normalize_value(first.get("name")) or fallback
    return fallback
