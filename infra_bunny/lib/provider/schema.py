"""
Declarative resource schemas.

Pulumi dynamic providers receive and return untyped property dicts. A ``Schema`` describes the fields of a resource
(types, defaults, validation, which changes force a replacement) and implements the ``check`` and ``diff`` steps of
the provider protocol on top of it.

Value types:

- ``str``, ``bool``, ``int``, ``float``: scalars,
- ``set``: an unordered list of scalars, ``elem`` is the scalar type,
- ``list``: a list of nested blocks, ``elem`` is a ``Schema``. Blocks are stored as one-element lists.

Absent values are ``None``.
"""
import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from pulumi.runtime.rpc import UNKNOWN

from .sets import normalize_str_list
from .validation import Validator

DiffSuppressFunc = Callable[[str, Any, Any], bool]

_ZERO_VALUES = {
    str: "",
    bool: False,
    int: 0,
    float: 0.0,
    set: [],
    list: [],
}


def is_unknown(value: Any) -> bool:
    """Whether ``value`` is not known yet during a preview, a set counts as unknown if one of its elements is"""
    if isinstance(value, str):
        return value == UNKNOWN
    if isinstance(value, list):
        return any(isinstance(v, str) and v == UNKNOWN for v in value)
    return False


@dataclass
class Field:
    type: type
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    default: Any = None
    validate: Optional[Validator] = None
    diff_suppress: Optional[DiffSuppressFunc] = None
    elem: Union[type, "Schema", None] = None
    max_items: Optional[int] = None
    conflicts_with: tuple[str, ...] = field(default_factory=tuple)
    required_with: tuple[str, ...] = field(default_factory=tuple)

    @property
    def computed_only(self) -> bool:
        return self.computed and not (self.required or self.optional)

    @property
    def zero_value(self) -> Any:
        return copy.copy(_ZERO_VALUES[self.type])

    def coerce(self, value: Any) -> Any:
        """Pulumi transports numbers as floats, integral values of int fields are turned back into ``int``"""
        if self.type is int and isinstance(value, float) and value.is_integer():
            return int(value)
        if self.type is set and self.elem is int and isinstance(value, list):
            return [int(v) if isinstance(v, float) and v.is_integer() else v for v in value]
        if self.type is list and isinstance(self.elem, Schema) and isinstance(value, list):
            return [self.elem.coerce(v) if isinstance(v, dict) else v for v in value]
        return value

    def normalize(self, value: Any) -> Any:
        """Representation of ``value`` used to decide whether two values are equal

        Absent values equal the zero value of the type, sets ignore their order.
        """
        if value is None:
            value = self.zero_value

        value = self.coerce(value)

        if self.type is set and isinstance(value, list):
            return sorted(value, key=str)
        if self.type is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if self.type is list and isinstance(self.elem, Schema) and isinstance(value, list):
            return [self.elem.normalize(v) if isinstance(v, dict) else v for v in value]

        return value


def _type_error(f: Field, value: Any) -> Optional[str]:
    if f.type is bool:
        ok = isinstance(value, bool)
    elif f.type is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif f.type is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif f.type is str:
        ok = isinstance(value, str)
    else:
        ok = isinstance(value, list)

    if not ok:
        return f"expected type {f.type.__name__}, got {type(value).__name__}"

    if f.type is set and isinstance(f.elem, type):
        for elem in value:
            if elem != UNKNOWN and _type_error(Field(type=f.elem), elem):
                return f"expected a set of {f.elem.__name__}, got element {elem!r}"

    if f.type is list and isinstance(f.elem, Schema):
        for elem in value:
            if not isinstance(elem, dict):
                return f"expected a list of blocks, got element {elem!r}"

    return None


class Schema(dict):
    """A mapping of field names to ``Field``"""

    def normalize(self, values: dict) -> dict:
        return {key: f.normalize(values.get(key)) for key, f in self.items() if not f.computed_only}

    def coerce(self, values: dict) -> dict:
        return {key: self[key].coerce(value) if key in self else value for key, value in values.items()}

    def sensitive_keys(self) -> list[str]:
        return [key for key, f in self.items() if f.sensitive]

    def apply_defaults(self, inputs: dict) -> dict:
        """Return a copy of ``inputs`` with defaults filled in for absent fields, including fields of nested blocks"""
        result = self.coerce(inputs)

        for key, f in self.items():
            value = result.get(key)

            if value is None and f.default is not None:
                value = copy.deepcopy(f.default)

            if f.type is list and isinstance(f.elem, Schema) and isinstance(value, list):
                value = [f.elem.apply_defaults(v) if isinstance(v, dict) else v for v in value]

            if value is not None or key in result:
                result[key] = value

        return result

    def validate(self, inputs: dict, path: str = "") -> list[tuple[str, str]]:
        """Validate resource inputs

        :param inputs: Resource inputs with defaults applied
        :param path: Prefix for the reported field names, used for nested blocks
        :return: A list of ``(field, reason)`` tuples, empty if the inputs are valid
        """
        failures = []

        for key, f in self.items():
            name = f"{path}{key}"
            value = inputs.get(key)

            if isinstance(value, str) and value == UNKNOWN:
                continue

            if value is None:
                if f.required:
                    failures.append((name, f'"{name}": required field is not set'))
                continue

            if f.computed_only:
                failures.append((name, f'"{name}": computed field can not be set'))
                continue

            if msg := _type_error(f, value):
                failures.append((name, f'"{name}": {msg}'))
                continue

            if f.max_items is not None and len(value) > f.max_items:
                failures.append((name, f'"{name}": attribute supports {f.max_items} item maximum, config has {len(value)} declared'))

            if f.validate and (msg := f.validate(value)):
                failures.append((name, f'"{name}": {msg}'))

            for other in f.conflicts_with:
                if inputs.get(other) is not None:
                    failures.append((name, f'only one of "{key}" or "{other}" can be specified'))

            for other in f.required_with:
                if inputs.get(other) is None:
                    failures.append((name, f'"{name}": all of "{key}" and "{other}" must be specified'))

            if f.type is list and isinstance(f.elem, Schema):
                for i, elem in enumerate(value):
                    failures.extend(f.elem.validate(elem, f"{name}.{i}."))

        return failures

    def diff(self, olds: dict, news: dict) -> tuple[list[str], list[str]]:
        """Compare the stored state with new inputs

        Computed-only fields never produce a change, neither do optional computed fields absent from ``news``.

        :param olds: The stored state of the resource
        :param news: The new inputs of the resource
        :return: ``(changes, replaces)``, the changed fields and the subset of them requiring a replacement
        """
        changes = []
        replaces = []

        for key, f in self.items():
            if f.computed_only:
                continue

            old = olds.get(key)
            new = news.get(key)

            if new is None and f.computed:
                continue

            # an unknown input may differ from the stored value
            if is_unknown(new):
                changes.append(key)
                if f.force_new:
                    replaces.append(key)
                continue

            if f.diff_suppress and f.diff_suppress(key, old, new):
                continue

            if self._field_equal(f, key, old, new):
                continue

            changes.append(key)
            if f.force_new:
                replaces.append(key)

        return changes, replaces

    @staticmethod
    def _field_equal(f: Field, key: str, old: Any, new: Any) -> bool:
        if not (f.type is list and isinstance(f.elem, Schema)):
            return f.normalize(old) == f.normalize(new)

        old = old or []
        new = new or []
        if len(old) != len(new):
            return False

        # nested blocks are compared field by field so that nested diff suppression applies
        for old_elem, new_elem in zip(old, new):
            if not isinstance(new_elem, dict):
                return False
            changes, _ = f.elem.diff(old_elem or {}, new_elem or {})
            if changes:
                return False

        return True


def suppress_missing_optional_block(key: str, old: Any, new: Any) -> bool:
    """A block removed from the inputs keeps its remote values instead of producing a diff"""
    return len(old or []) == 1 and len(new or []) == 0


def suppress_int_unset(key: str, old: Any, new: Any) -> bool:
    """An unset (or zero) integer keeps the remote value"""
    return not new


def suppress_equivalent_str_list(sep: str = ",") -> DiffSuppressFunc:
    """Comma separated lists that only differ in order or whitespace are equal"""

    def suppress(key, old, new):
        return normalize_str_list(old or "", sep) == normalize_str_list(new or "", sep)

    return suppress
