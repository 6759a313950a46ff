"""
Generate JSON-friendly descriptions of all registered needle kinds.

Combines registry information (kind, adapted source type) with introspection
of each needle class's pydantic fields (types, defaults, descriptions).
"""

import inspect
import re
from collections.abc import Callable
from enum import Enum
from typing import Any, get_args, get_origin

from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined

from .registry import list_registered_needles


def _extract_class_description(needle_class: type) -> str:
    """Extract class description from the needle class's own docstring."""
    if needle_class.__doc__:
        cleaned = inspect.cleandoc(needle_class.__doc__)
        return cleaned if cleaned.strip() else ""
    return ""


def _get_type_string(annotation: Any) -> str:  # noqa: ANN401, PLR0911
    """Convert a needle field annotation to a short type string."""
    if annotation is str:
        return "string"
    if annotation is bool:
        return "boolean"
    if annotation is int:
        return "integer"

    if inspect.isclass(annotation) and issubclass(annotation, Enum):
        return f"enum<{','.join(str(member.value) for member in annotation)}>"

    origin = get_origin(annotation)
    if annotation is re.Pattern or origin is re.Pattern:
        return "pattern"
    if annotation is Callable or origin is Callable:
        args = get_args(annotation)
        if args and isinstance(args[0], list):
            params = ','.join(_get_type_string(arg) for arg in args[0])
            return f"callable<{params}>"
        return "callable"

    return getattr(annotation, "__name__", str(annotation))


def _extract_field_schema(field_info: FieldInfo) -> dict[str, Any]:
    """Extract schema information for a single field."""
    field_schema = {
        "type": _get_type_string(field_info.annotation),
        "required": field_info.is_required(),
        "description": field_info.description or "",
    }

    if field_info.default is not PydanticUndefined:
        default = field_info.default
        field_schema["default"] = default.value if isinstance(default, Enum) else default

    if field_info.alias:
        field_schema["alias"] = field_info.alias

    return field_schema


def _kind_schema(kind: str, info: dict[str, Any]) -> dict[str, Any]:
    needle_class = info["class"]
    source_type = info["source_type"]
    return {
        "kind": kind,
        "needle_class": needle_class.__name__,
        "source_type": source_type.__name__ if source_type is not None else None,
        "description": _extract_class_description(needle_class),
        "fields": {
            field_info.alias or field_name: _extract_field_schema(field_info)
            for field_name, field_info in needle_class.model_fields.items()
        },
    }


def generate_needles_schema() -> dict[str, Any]:
    """
    Generate schema information for every registered needle kind.

    Returns:
        Dict keyed by kind:
        {
            "string_match": {
                "kind": "string_match",
                "needle_class": "StringMatch",
                "source_type": null,
                "description": "...",
                "fields": {
                    "text": {"type": "string", "required": true, "description": "..."},
                    "match_length": {"type": "enum<full,partial,word>", "default": "full", ...}
                }
            }
        }

    Fields are keyed by the name they serialize under (their alias, if any).
    """
    return {
        kind: _kind_schema(kind, info)
        for kind, info in list_registered_needles().items()
    }


def generate_needle_schema(kind: str) -> dict[str, Any] | None:
    """
    Generate schema for a single needle kind.

    Returns:
        Schema dict for the kind, or None if it is not registered
    """
    info = list_registered_needles().get(str(kind))
    if info is None:
        return None
    return _kind_schema(str(kind), info)
