"""Sanity checks for generated newsletter text."""

import re
from dataclasses import dataclass, field

NEWSLETTER_TITLE = "# Vue.js Weekly Newsletter"

_PLACEHOLDER_RE = re.compile(r"\[[A-Z][^\]]*\]")
_SECTION_RE = re.compile(r"^##\s+", re.MULTILINE)
_MARKDOWN_LINK_RE = re.compile(r"\[[^\]]*\]\([^)]*\)")


@dataclass
class ValidationResult:
    """Outcome of newsletter content validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)


def has_placeholder_content(content: str) -> bool:
    """Detect template leftovers such as ``[Insert Title]``.

    Markdown links are ignored so ``[Vue 3.5](https://...)`` does not count.
    """
    without_links = _MARKDOWN_LINK_RE.sub("", content)
    return bool(_PLACEHOLDER_RE.search(without_links))


def validate_newsletter_content(content: str, title: str = NEWSLETTER_TITLE) -> ValidationResult:
    """Check generated newsletter for title, sections and placeholders."""
    errors: list[str] = []

    if title not in content:
        errors.append("Missing newsletter title")

    if not _SECTION_RE.search(content):
        errors.append("Newsletter must have at least one section (## heading)")

    if has_placeholder_content(content):
        errors.append("Newsletter contains placeholder content in brackets")

    return ValidationResult(is_valid=not errors, errors=errors)
