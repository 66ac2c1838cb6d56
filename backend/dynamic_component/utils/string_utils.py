import re
from typing import Any, Mapping, Sequence

_WORD_SPLIT = re.compile(r"[\s_\-]+")


def normalize_null_strings(obj: Any) -> Any:
    """Recursively convert string 'null' (case-insensitive) to None inside dict/list structures.

    Args:
        obj: The object to process. Can be a string, dictionary, list, or other type.

    Returns:
        The processed object with all 'null' strings converted to None.
        Other types are returned as-is.
    """
    if isinstance(obj, str):
        return None if obj.lower() == "null" else obj
    if isinstance(obj, Mapping):
        return {k: normalize_null_strings(v) for k, v in obj.items()}
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        return [normalize_null_strings(v) for v in obj]
    return obj


def camelize(value: str) -> str:
    """Turn an underscored or dashed word into a CamelCased identifier.

    ``"admin"`` becomes ``"Admin"`` and ``"site_admin"`` becomes ``"SiteAdmin"``.
    Characters after the first one of each word keep their case.
    """
    parts = [p for p in _WORD_SPLIT.split(value.strip()) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)
