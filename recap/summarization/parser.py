"""
Defensive parsing of model output into a structured summary.

The provider is asked for strict JSON but may still wrap the object in
prose or code fences, drop fields, or return the wrong types. Parsing here
never raises: whatever cannot be understood degrades to empty values.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .models import SummaryFields, LIST_FIELDS

logger = logging.getLogger(__name__)


def extract_json_object(raw: Optional[str]) -> Dict[str, Any]:
    """
    Recover a JSON object from raw model text.

    Tries the whole text first. If that fails, parses the span from the
    first ``{`` to the last ``}`` so nested objects are kept intact. Any
    remaining failure, or a top-level value that is not an object, yields
    an empty dict.

    Args:
        raw: Text returned by the model

    Returns:
        Parsed object or an empty dict
    """
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError):
        start = raw.find("{")
        end = raw.rfind("}")
        if start == -1 or end <= start:
            logger.debug("No JSON object boundaries found in model output")
            return {}
        try:
            data = json.loads(raw[start:end + 1])
        except (json.JSONDecodeError, RecursionError):
            logger.debug("Embedded JSON object could not be parsed")
            return {}

    if not isinstance(data, dict):
        logger.debug(f"Model output parsed to {type(data).__name__}, expected object")
        return {}
    return data


def _string_list(value: Any) -> List[str]:
    # Non-string items are dropped so the field stays a list of strings
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def coerce_fields(data: Any) -> SummaryFields:
    """
    Build a fully typed SummaryFields from a decoded JSON value.

    Each field is checked on its own; a field with the wrong type falls
    back to its empty value without affecting the others.
    """
    if not isinstance(data, dict):
        data = {}

    summary = data.get("summary")
    return SummaryFields(
        summary=summary if isinstance(summary, str) else "",
        **{name: _string_list(data.get(name)) for name in LIST_FIELDS},
    )


def coerce_summary(raw: Optional[str]) -> SummaryFields:
    """Convert raw model text into a fully typed SummaryFields."""
    return coerce_fields(extract_json_object(raw))
