"""Structural RSS/Atom extraction and date parsing."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional
from xml.etree import ElementTree as ET

from vue_weekly.core.exceptions import FeedParseError


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Find a direct child by local name, preferring the un-namespaced one."""
    fallback = None
    for child in element:
        if child.tag == name:
            return child
        if fallback is None and _local_name(child.tag) == name:
            fallback = child
    return fallback


def _text(element: Optional[ET.Element]) -> str:
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def _parse_root(xml_content: str) -> ET.Element:
    try:
        return ET.fromstring(xml_content.strip())
    except ET.ParseError as e:
        raise FeedParseError(f"Malformed feed XML: {e}") from e


def parse_rss_items(xml_content: str) -> list[dict[str, str]]:
    """Extract ``<item>`` blocks from an RSS feed.

    Returns:
        One dict per item with ``title``, ``link`` and ``pubDate`` keys.
        Missing elements become empty strings.
    """
    root = _parse_root(xml_content)

    items = []
    for item in root.iter():
        if _local_name(item.tag) != "item":
            continue
        items.append({
            "title": _text(_child(item, "title")),
            "link": _text(_child(item, "link")),
            "pubDate": _text(_child(item, "pubDate")),
        })

    return items


def _atom_link(entry: ET.Element) -> str:
    """Pick the alternate link of an Atom entry."""
    for child in entry:
        if _local_name(child.tag) != "link":
            continue
        rel = child.get("rel", "alternate")
        href = child.get("href", "")
        if rel == "alternate" and href:
            return href.strip()
    return ""


def parse_atom_entries(xml_content: str) -> list[dict[str, str]]:
    """Extract ``<entry>`` blocks from an Atom feed.

    Returns:
        One dict per entry with ``title``, ``link`` and ``updated`` keys.
    """
    root = _parse_root(xml_content)

    entries = []
    for entry in root.iter():
        if _local_name(entry.tag) != "entry":
            continue
        entries.append({
            "title": _text(_child(entry, "title")),
            "link": _atom_link(entry),
            "updated": _text(_child(entry, "updated")),
        })

    return entries


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an RFC 822 or ISO 8601 timestamp.

    Returns:
        A timezone-aware datetime (naive values are taken as UTC), or None
        when value is empty or unparseable.
    """
    if not value:
        return None

    value = value.strip()
    parsed: Optional[datetime] = None

    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
