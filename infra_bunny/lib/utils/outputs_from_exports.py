from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from pulumi import get_stack


def _map(val: Any) -> Any:
    if isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    elif is_dataclass(val):
        # unset optional attributes, e.g. a storage zone without replication, are left out of the outputs
        return {f.name: _map(getattr(val, f.name)) for f in fields(val) if getattr(val, f.name) is not None}
    elif isinstance(val, dict):
        return {k: _map(v) for k, v in val.items()}
    elif isinstance(val, (list, tuple)):
        return [_map(v) for v in val]
    elif isinstance(val, Enum):
        return val.value
    else:
        # plain values and pulumi.Output pass through as they are
        return val


def outputs_from_exports(exports: object) -> dict[str, Any]:
    """Generate the outputs of a module from its exports dataclass

    Nested dataclasses become dicts, enums are exported by value.

    :param exports: The exports object returned by ``build``
    :return: The outputs keyed by the stack name
    """
    return {
        get_stack(): _map(exports),
    }
