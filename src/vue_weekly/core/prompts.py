"""Prompt template helpers."""

CONTEXT_PLACEHOLDER = "CONTEXT_DATA"


def interpolate_prompt(template: str, data: dict[str, str]) -> str:
    """Replace every ``{{KEY}}`` in template with the matching value.

    Unknown placeholders are left untouched. Values are inserted literally,
    so braces inside them are never interpreted.
    """
    result = template
    for key, value in data.items():
        result = result.replace("{{" + key + "}}", value)
    return result
