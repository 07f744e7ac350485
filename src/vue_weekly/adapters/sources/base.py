"""Shared behaviour for configured source adapters."""

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from vue_weekly.core.entities import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    Item,
    ResourceConfig,
    is_absolute_url,
)
from vue_weekly.core.exceptions import FeedParseError, ResourceValidationError
from vue_weekly.core.interfaces import Resource
from vue_weekly.logging import get_logger

logger = get_logger(__name__)

Schema = Union[type[BaseModel], TypeAdapter]


def normalize_priority(value: Any, resource_id: str) -> int:
    """Return value if it is a valid 1..5 priority, otherwise the default."""
    if isinstance(value, int) and not isinstance(value, bool) and MIN_PRIORITY <= value <= MAX_PRIORITY:
        return value

    logger.warning(
        "priority_out_of_range",
        resource_id=resource_id,
        priority=value,
        fallback=DEFAULT_PRIORITY,
    )
    return DEFAULT_PRIORITY


class ConfiguredResource(Resource):
    """Base for adapters built from a ResourceConfig.

    Construction only stores settings; all I/O happens in fetch().
    """

    default_limit = 10
    default_source = ""

    def __init__(self, config: ResourceConfig, timeout: Optional[float] = None) -> None:
        self.id = config.id
        self.config = config
        self.url = config.url
        self.limit = config.limit if config.limit is not None else self.default_limit
        self.priority = normalize_priority(config.priority, config.id)
        self.timeout = timeout
        self.source = config.tag or self.default_source

    def _request_kwargs(self) -> dict[str, Any]:
        return {} if self.timeout is None else {"timeout": self.timeout}

    def _validate(self, schema: Schema, payload: Any) -> Any:
        """Validate payload, logging issues and raising on mismatch."""
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(payload)
            return schema.model_validate(payload)
        except ValidationError as e:
            issues = e.errors(include_url=False)
            logger.error("resource_validation_failed", resource_id=self.id, issues=issues)
            raise ResourceValidationError(self.id, issues) from e

    def _parse_feed(self, parser: Callable[[str], list[dict[str, str]]], xml_content: str) -> list[dict[str, str]]:
        """Run a structural feed parser, treating malformed XML as invalid."""
        try:
            return parser(xml_content)
        except FeedParseError as e:
            issues = [{"type": "xml_parse", "msg": str(e)}]
            logger.error("resource_validation_failed", resource_id=self.id, issues=issues)
            raise ResourceValidationError(self.id, issues) from e

    def _make_item(self, title: Optional[str], url: Optional[str], **fields: Any) -> Optional[Item]:
        """Build an Item, or None when title or absolute url is missing."""
        title = (title or "").strip()
        url = (url or "").strip()
        if not title or not url or not is_absolute_url(url):
            return None
        fields.setdefault("source", self.source)
        return Item(title=title, url=url, priority=self.priority, **fields)
