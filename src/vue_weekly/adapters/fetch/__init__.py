"""HTTP transport and feed parsing."""

from vue_weekly.adapters.fetch.http import DEFAULT_TIMEOUT, get_json, get_text
from vue_weekly.adapters.fetch.parsers import parse_atom_entries, parse_date, parse_rss_items

__all__ = [
    "DEFAULT_TIMEOUT",
    "get_text",
    "get_json",
    "parse_rss_items",
    "parse_atom_entries",
    "parse_date",
]
