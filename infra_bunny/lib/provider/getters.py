"""
Typed accessors for ``ResourceData`` fields.

They return ``None`` for absent fields so that request payloads omit them and the remote side keeps its values.
"""
from typing import Optional


def get_ok_str(d, key: str) -> Optional[str]:
    """The string value of ``key``, ``None`` if it is absent or empty"""
    value, ok = d.get_ok(key)
    return value if ok else None


def get_str(d, key: str) -> Optional[str]:
    return d.get(key)


def get_bool(d, key: str) -> Optional[bool]:
    return d.get(key)


def get_int(d, key: str) -> Optional[int]:
    value = d.get(key)
    return int(value) if value is not None else None


def get_float(d, key: str) -> Optional[float]:
    value = d.get(key)
    return float(value) if value is not None else None


def get_str_set_as_list(d, key: str) -> list[str]:
    """The elements of a string set, an absent set is empty

    An empty list is sent to the API as is, it clears the remote collection.
    """
    return list(d.get(key) or [])


def get_id_as_int(d) -> int:
    """Convert the resource id to an int

    :raises ValueError: The id is empty or not an integer
    """
    if not d.id:
        raise ValueError("id is empty")

    try:
        return int(d.id)
    except ValueError as e:
        raise ValueError(f"converting id to integer failed: {e}")
