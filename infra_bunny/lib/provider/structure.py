"""
Conversion between nested blocks and their typed dataclass form.

A nested block is stored in the resource state as an optional one-element list of dicts, nested blocks inside a block
the same way. The typed form is a dataclass with ``Optional`` fields whose names equal the block's field names.
"""
from dataclasses import fields, is_dataclass
from functools import cache
from typing import Any, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from dacite import Config, from_dict

T = TypeVar("T")


@cache
def _block_fields(cls: type) -> dict[str, Optional[type]]:
    """Map field names of ``cls`` to their block dataclass, ``None`` for plain fields"""
    result = {}
    for name, type_ in get_type_hints(cls).items():
        if get_origin(type_) is Union:
            type_ = next(arg for arg in get_args(type_) if arg is not type(None))
        result[name] = type_ if is_dataclass(type_) else None
    return result


def _unwrap(key: str, value: Any) -> Optional[dict]:
    if not value:
        return None
    if len(value) != 1:
        raise ValueError(f"{key}: expected list with length 0 or 1, got length: {len(value)}")
    return value[0]


def expand_block(cls: Type[T], raw: dict) -> T:
    """Build the dataclass ``cls`` from a block dict, expanding nested blocks recursively"""
    data = {}
    for name, block_cls in _block_fields(cls).items():
        if name not in raw:
            continue
        value = raw[name]
        if block_cls is not None:
            nested = _unwrap(name, value)
            value = expand_block(block_cls, nested) if nested is not None else None
        data[name] = value

    return from_dict(data_class=cls, data=data, config=Config(cast=[int, float]))


def block_from_resource(d, key: str, cls: Type[T]) -> Optional[T]:
    """Read the nested block ``key`` from the resource data

    :param d: The ``ResourceData`` of the resource
    :param key: The block field
    :param cls: The block dataclass
    :return: An instance of ``cls``, ``None`` if the block is absent
    :raises ValueError: The block holds more than one element
    """
    raw = _unwrap(key, d.get(key))
    if raw is None:
        return None

    return expand_block(cls, raw)


def flatten_block(obj: Any) -> list[dict]:
    """Convert a block dataclass into its one-element list form, ``None`` becomes an empty list"""
    if obj is None:
        return []

    return [{f.name: _flatten_value(getattr(obj, f.name)) for f in fields(obj)}]


def _flatten_value(value: Any) -> Any:
    if is_dataclass(value):
        return flatten_block(value)
    return value
