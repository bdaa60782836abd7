import copy
from typing import Any, Optional

from .schema import Schema


class ResourceData:
    """
    The state of one resource during a single provider operation.

    It combines the previously stored state, the planned inputs and the values written by the operation:

    - ``get`` returns the value written with ``set`` if there is one, else the planned input, else the stored state.
      Optional computed fields that are absent from the inputs fall back to the stored state.
    - ``state`` returns the new state to persist. When the data was marked ``partial``, fields that were only planned
      and never confirmed with ``set`` keep their previously stored value.
      Force-new fields always take the planned input, they identify the remote object.

    Example usage:
        d = ResourceData(schema, state=olds, config=news, id_="42")

        if d.has_change("origin_url"):
            ...

        d.set("cname_domain", zone.cname_domain)
        outputs = d.state()
    """

    def __init__(self, schema: Schema, state: Optional[dict] = None, config: Optional[dict] = None, id_: str = ""):
        self._schema = schema
        self._state = schema.coerce(state or {})
        self._config = schema.coerce(config) if config is not None else None
        self._written = {}
        self._id = id_ or ""
        self._partial = False

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, id_) -> None:
        self._id = str(id_) if id_ not in (None, "") else ""

    def _field(self, key: str):
        try:
            return self._schema[key]
        except KeyError:
            raise KeyError(f"invalid key `{key}`, it is not part of the resource schema")

    def _planned(self, key: str) -> Any:
        field = self._field(key)

        if self._config is None:
            return self._state.get(key)

        value = self._config.get(key)
        if value is None and field.computed:
            return self._state.get(key)

        return value

    def get(self, key: str) -> Any:
        if key in self._written:
            return self._written[key]

        return self._planned(key)

    def get_ok(self, key: str) -> tuple[Any, bool]:
        """Return the value and whether it is set to something other than its zero value"""
        value = self.get(key)
        return value, value is not None and value != self._field(key).zero_value

    def set(self, key: str, value: Any) -> None:
        self._written[key] = self._field(key).coerce(copy.deepcopy(value))

    def get_change(self, key: str) -> tuple[Any, Any]:
        return self._state.get(key), self.get(key)

    def has_change(self, key: str) -> bool:
        field = self._field(key)
        old, new = self.get_change(key)
        return field.normalize(old) != field.normalize(new)

    def partial(self, on: bool = True) -> None:
        self._partial = on

    @property
    def is_partial(self) -> bool:
        return self._partial

    def state(self) -> dict:
        result = {}

        for key in self._schema:
            if key in self._written:
                result[key] = self._written[key]
            elif self._partial and not self._schema[key].force_new:
                result[key] = self._state.get(key)
            else:
                result[key] = self._planned(key)

        return result
