"""Remediation hints for configuration validation errors.

Errors come from ConfigLoader as ``{"loc", "msg", "type"}`` records. A
hint is looked up by the most specific field name in the location
first, then by the pydantic error type.
"""

from collections.abc import Iterable, Mapping
from typing import Final

from matchsorter.ranking import Tier


DEFAULT_HINT: Final = "Check the configuration documentation for valid values."

ERROR_HINTS: Final[dict[str, str]] = {
    "missing": "This field is required. Please add it to your configuration.",
    "string_type": "This field must be a text string.",
    "bool_type": "This field must be true or false.",
    "bool_parsing": "This field must be true or false.",
    "list_type": "This field must be a list/array.",
    "model_type": "This section must be a mapping of fields.",
    "extra_forbidden": "Unknown field. Allowed key fields: path, threshold, "
    "max_ranking, min_ranking.",
    "string_too_short": "The value is empty.",
    "string_too_long": "The value is too long.",
    "file_not_found": "The file does not exist. Check the file path.",
    "file_encoding": "The file is not valid UTF-8. Re-save it as UTF-8.",
    "yaml_parse_error": "Invalid YAML syntax. Check indentation and quoting.",
}


def _ranking_hint() -> str:
    names = ", ".join(tier.name.lower() for tier in reversed(Tier))
    return f"Use a ranking name ({names}) or 'matches:<score>' with 1 <= score <= 2."


RANKING_FIELDS: Final = frozenset({"threshold", "max_ranking", "min_ranking"})

FIELD_HINTS: Final[dict[str, str]] = {
    "path": "Use a dotted path to the value, e.g. 'name' or 'author.name'.",
    "keep_diacritics": "Must be true or false.",
    "keys": "Must be a list of key entries, each with at least a 'path'.",
    **{field: _ranking_hint() for field in RANKING_FIELDS},
}


def _field_name(location: str) -> str | None:
    """Most specific named segment of a location, skipping list indices."""
    for part in reversed(location.split(".")):
        if part and not part.isdigit():
            return part
    return None


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a validation error.

    Args:
        error_type: Pydantic or loader error type (e.g. 'missing').
        field_name: Optional location such as 'keys.0.threshold'.

    Returns:
        A user-friendly hint string.
    """
    name = _field_name(field_name) if field_name else None
    if name in FIELD_HINTS:
        return FIELD_HINTS[name]
    return ERROR_HINTS.get(error_type, DEFAULT_HINT)


def format_validation_error(
    error: Mapping[str, str],
    *,
    include_hint: bool = True,
) -> str:
    """Render one loader error record.

    Args:
        error: Record with 'loc', 'msg' and optionally 'type'.
        include_hint: Append a remediation hint line.

    Returns:
        Formatted error string.
    """
    location = error.get("loc", "config")
    text = f"{location}: {error.get('msg', '')}"
    if not include_hint:
        return text
    hint = get_error_hint(error.get("type", "unknown"), location)
    return f"{text}\n    Hint: {hint}"


def format_validation_errors(errors: Iterable[Mapping[str, str]]) -> list[str]:
    """Render every error record with its hint."""
    return [format_validation_error(error) for error in errors]
