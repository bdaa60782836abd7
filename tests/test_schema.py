import pytest

from infra_bunny.lib.provider import (
    Diagnostics,
    Field,
    ProviderError,
    ResourceData,
    Schema,
    errors_from,
    get_id_as_int,
    get_int,
    get_ok_str,
    get_str_set_as_list,
    is_unknown,
    suppress_equivalent_str_list,
    suppress_int_unset,
    suppress_missing_optional_block,
)
from infra_bunny.lib.provider.validation import int_between, one_of
from pulumi.runtime.rpc import UNKNOWN

block_schema = Schema(
    enabled=Field(bool, optional=True, default=True),
    size=Field(int, optional=True, validate=int_between(1, 10)),
)

schema = Schema(
    name=Field(str, required=True, force_new=True),
    origin_url=Field(str, optional=True, computed=True, conflicts_with=("storage_zone_id",)),
    storage_zone_id=Field(int, optional=True, computed=True, force_new=True),
    kind=Field(str, optional=True, default="all", validate=one_of(["any", "all", "none"])),
    countries=Field(set, elem=str, optional=True),
    extensions=Field(str, optional=True, diff_suppress=suppress_equivalent_str_list(",")),
    timeout=Field(int, optional=True, diff_suppress=suppress_int_unset),
    block=Field(list, elem=block_schema, optional=True, max_items=1, diff_suppress=suppress_missing_optional_block),
    cname_domain=Field(str, computed=True),
)


class TestApplyDefaults:
    """Tests for filling in default values."""

    def test_defaults(self):
        """Absent fields with a default get it, nested blocks included."""
        inputs = schema.apply_defaults({"name": "zone", "block": [{"size": 3}]})

        assert inputs["kind"] == "all"
        assert inputs["block"] == [{"size": 3, "enabled": True}]
        assert "origin_url" not in inputs

    def test_set_values_are_kept(self):
        """Configured values win over defaults."""
        assert schema.apply_defaults({"name": "zone", "kind": "none"})["kind"] == "none"

    def test_integral_floats_become_ints(self):
        """Pulumi transports numbers as floats."""
        assert schema.apply_defaults({"name": "zone", "timeout": 5.0})["timeout"] == 5


class TestValidate:
    """Tests for input validation."""

    def test_valid(self):
        """Valid inputs produce no failures."""
        assert schema.validate(schema.apply_defaults({"name": "zone", "origin_url": "https://example.com"})) == []

    def test_required(self):
        """Required fields must be set."""
        assert schema.validate({}) == [("name", '"name": required field is not set')]

    def test_type(self):
        """Values must have the field's type."""
        failures = schema.validate({"name": "zone", "storage_zone_id": "one", "countries": ["DE", 1]})

        assert ("storage_zone_id", '"storage_zone_id": expected type int, got str') in failures
        assert [key for key, _ in failures] == ["storage_zone_id", "countries"]

    def test_bool_is_not_int(self):
        """Booleans are not accepted for integer fields."""
        assert schema.validate({"name": "zone", "timeout": True})[0][0] == "timeout"

    def test_validator(self):
        """Field validators are applied."""
        failures = schema.validate({"name": "zone", "kind": "some"})

        assert failures == [("kind", "\"kind\": expected to be one of ['any', 'all', 'none'], got 'some'")]

    def test_conflicts(self):
        """Conflicting fields can not be set together."""
        failures = schema.validate({"name": "zone", "origin_url": "https://example.com", "storage_zone_id": 1})

        assert failures == [("origin_url", 'only one of "origin_url" or "storage_zone_id" can be specified')]

    def test_max_items(self):
        """Blocks hold at most one element."""
        failures = schema.validate({"name": "zone", "block": [{}, {}]})

        assert failures == [("block", '"block": attribute supports 1 item maximum, config has 2 declared')]

    def test_nested(self):
        """Fields of nested blocks are validated with their path."""
        failures = schema.validate({"name": "zone", "block": [{"size": 11}]})

        assert failures == [("block.0.size", '"block.0.size": expected to be in the range (1 - 10), got 11')]

    def test_computed_only(self):
        """Computed fields can not be set."""
        assert schema.validate({"name": "zone", "cname_domain": "x"}) == [
            ("cname_domain", '"cname_domain": computed field can not be set')
        ]

    def test_unknown_values_are_skipped(self):
        """Values that are not known during a preview are not validated."""
        assert schema.validate({"name": UNKNOWN, "storage_zone_id": UNKNOWN}) == []


class TestDiff:
    """Tests for comparing state and inputs."""

    olds = {
        "name": "zone",
        "origin_url": "https://example.com",
        "storage_zone_id": None,
        "kind": "all",
        "countries": ["DE", "AT"],
        "extensions": "css, woff",
        "timeout": 10,
        "block": [{"enabled": True, "size": 3}],
        "cname_domain": "zone.b-cdn.net",
    }

    def test_no_change(self):
        """Equal values, reordered sets and absent computed fields produce no diff."""
        news = {**self.olds, "countries": ["AT", "DE"], "origin_url": None, "cname_domain": None}

        assert schema.diff(self.olds, news) == ([], [])

    def test_change(self):
        """Changed fields are reported."""
        assert schema.diff(self.olds, {**self.olds, "kind": "any"}) == (["kind"], [])

    def test_force_new(self):
        """Changing a force-new field requires a replacement."""
        assert schema.diff(self.olds, {**self.olds, "name": "other"}) == (["name"], ["name"])

    def test_suppressed(self):
        """Diff suppression functions are honoured."""
        news = {**self.olds, "extensions": "woff,css", "timeout": 0, "block": []}

        assert schema.diff(self.olds, news) == ([], [])

    def test_nested_change(self):
        """A changed field of a nested block changes the block."""
        assert schema.diff(self.olds, {**self.olds, "block": [{"enabled": False, "size": 3}]}) == (["block"], [])

    def test_unknown_values(self):
        """Unknown inputs are planned as changes without being compared, blocks and sets included."""
        news = {**self.olds, "name": UNKNOWN, "block": UNKNOWN, "countries": ["DE", UNKNOWN]}

        assert schema.diff(self.olds, news) == (["name", "countries", "block"], ["name"])

    def test_unknown_nested_value(self):
        news = {**self.olds, "block": [{"enabled": True, "size": UNKNOWN}]}

        assert schema.diff(self.olds, news) == (["block"], [])

    def test_is_unknown(self):
        assert is_unknown(UNKNOWN)
        assert is_unknown(["a", UNKNOWN])
        assert not is_unknown(["a"])
        assert not is_unknown(None)
        assert not is_unknown(3)


class TestSuppressFuncs:
    """Tests for the diff suppression functions."""

    @pytest.mark.parametrize(
        "old, new, suppressed",
        [
            ([{"a": 1}], [], True),
            ([{"a": 1}], None, True),
            ([], [{"a": 1}], False),
            ([{"a": 1}], [{"a": 2}], False),
        ],
    )
    def test_missing_optional_block(self, old, new, suppressed):
        """Only a block removed from the inputs is suppressed."""
        assert suppress_missing_optional_block("block", old, new) is suppressed

    def test_equivalent_str_list(self):
        """Comma separated lists compare without order and whitespace."""
        suppress = suppress_equivalent_str_list(",")

        assert suppress("extensions", "eot, ttf,woff", "woff,eot , ttf")
        assert not suppress("extensions", "eot, ttf", "eot")


class TestResourceData:
    """Tests for reading and writing resource state."""

    def test_get_prefers_written_then_planned_then_stored(self):
        """set overrides inputs, absent optional computed inputs fall back to the stored state."""
        d = ResourceData(
            schema,
            state={"name": "zone", "origin_url": "https://old.example.com", "kind": "any"},
            config={"name": "zone", "kind": "none"},
        )

        assert d.get("kind") == "none"
        assert d.get("origin_url") == "https://old.example.com"
        assert d.get("countries") is None

        d.set("kind", "all")
        assert d.get("kind") == "all"

    def test_has_change(self):
        """Changes are detected with the field's normalisation."""
        d = ResourceData(
            schema,
            state={"countries": ["DE", "AT"], "kind": "any"},
            config={"countries": ["AT", "DE"], "kind": "all"},
        )

        assert not d.has_change("countries")
        assert d.has_change("kind")
        assert d.get_change("kind") == ("any", "all")

    def test_unknown_key(self):
        """Fields outside of the schema can not be set."""
        d = ResourceData(schema)

        with pytest.raises(KeyError, match="not part of the resource schema"):
            d.set("unknown", 1)

    def test_state_contains_schema_keys(self):
        """The persisted state holds every schema field."""
        d = ResourceData(schema, config={"name": "zone"})
        d.set("cname_domain", "zone.b-cdn.net")

        state = d.state()

        assert set(state) == set(schema)
        assert state["name"] == "zone"
        assert state["cname_domain"] == "zone.b-cdn.net"

    def test_partial_state_keeps_unconfirmed_values(self):
        """When partial, planned values that were not confirmed keep the stored state."""
        d = ResourceData(schema, state={"name": "zone", "kind": "any"}, config={"name": "zone", "kind": "none"})
        d.set("cname_domain", "zone.b-cdn.net")
        d.partial(True)

        state = d.state()

        assert state["kind"] == "any"
        assert state["cname_domain"] == "zone.b-cdn.net"

    def test_partial_state_keeps_planned_force_new_values(self):
        """Fields that identify the remote object are stored from the inputs even when partial."""
        d = ResourceData(schema, config={"name": "zone", "storage_zone_id": 4, "kind": "none"})
        d.partial(True)

        state = d.state()

        assert state["name"] == "zone"
        assert state["storage_zone_id"] == 4
        assert state["kind"] is None

    def test_id(self):
        """Ids are stored as strings, None clears them."""
        d = ResourceData(schema)

        d.set_id(42)
        assert d.id == "42"
        assert get_id_as_int(d) == 42

        d.set_id(None)
        assert d.id == ""
        with pytest.raises(ValueError, match="id is empty"):
            get_id_as_int(d)

    def test_non_integer_id(self):
        """Ids of integer-identified resources must be integers."""
        with pytest.raises(ValueError, match="converting id to integer failed"):
            get_id_as_int(ResourceData(schema, id_="abc"))


class TestGetters:
    """Tests for the typed field accessors."""

    def test_absent_values(self):
        """Absent fields are None, absent sets are empty."""
        d = ResourceData(schema, config={"name": "zone"})

        assert get_int(d, "storage_zone_id") is None
        assert get_ok_str(d, "extensions") is None
        assert get_str_set_as_list(d, "countries") == []

    def test_zero_value_is_not_ok(self):
        """An empty string is treated as absent by get_ok_str."""
        d = ResourceData(schema, config={"name": "zone", "extensions": ""})

        assert get_ok_str(d, "extensions") is None
        assert get_ok_str(d, "name") == "zone"


class TestDiagnostics:
    """Tests for collecting operation errors and warnings."""

    def test_raise_for_errors(self):
        """Error diagnostics are raised as ProviderError, warnings are not."""
        Diagnostics().warning("something is odd").raise_for_errors()

        diags = errors_from("updating pull zone via API failed", ValueError("boom"))
        with pytest.raises(ProviderError, match="updating pull zone via API failed: boom") as exc_info:
            diags.raise_for_errors()

        assert exc_info.value.diagnostics is diags

    def test_has_error(self):
        """has_error ignores warnings."""
        diags = Diagnostics().warning("w")
        assert not diags.has_error()

        diags.error("e", "detail")
        assert diags.has_error()
        assert [str(d) for d in diags.errors()] == ["e: detail"]
