import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def normalize_str_set(values: Optional[Iterable[str]], ignore_order: bool = False, case_insensitive: bool = False) -> list[str]:
    """Normalize a collection of strings for comparison

    :param values: The strings, ``None`` is an empty collection
    :param ignore_order: Sort the result
    :param case_insensitive: Lowercase every string
    :return: The normalized list
    """
    result = list(values or [])

    if case_insensitive:
        result = [v.lower() for v in result]
    if ignore_order:
        result.sort()

    return result


def set_str_set(d, key: str, values: Optional[list[str]], ignore_order: bool = False, case_insensitive: bool = False) -> None:
    """Write a string set to the resource data unless it equals the current value

    APIs that do not preserve the order or casing of a list would otherwise produce a diff on every refresh.

    :param d: The ``ResourceData`` of the resource
    :param key: The field
    :param values: The fetched strings
    :param ignore_order: Compare without regard to order
    :param case_insensitive: Compare without regard to case
    """
    current, is_set = d.get_ok(key)
    new = list(values or [])

    if is_set and normalize_str_set(current, ignore_order, case_insensitive) == normalize_str_set(
        new, ignore_order, case_insensitive
    ):
        logger.debug("set_str_set: %s %s and %s are equal, not setting value", key, current, new)
        return

    logger.debug("set_str_set: %s %s and %s are not equal, setting value", key, current, new)
    d.set(key, new)


def normalize_str_list(s: str, sep: str = ",") -> list[str]:
    """Split ``s`` at ``sep``, strip whitespace, drop empty elements and sort

    >>> normalize_str_list("woff, css,eot")
    ['css', 'eot', 'woff']
    """
    return sorted(part.strip() for part in s.split(sep) if part.strip())
