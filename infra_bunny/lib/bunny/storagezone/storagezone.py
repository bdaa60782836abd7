import logging
from typing import Optional

from pulumi import ResourceOptions

from infra_bunny.lib.client import API_ERRORS, Client, models
from infra_bunny.lib.provider import (
    BunnyResource,
    BunnyResourceProvider,
    Diagnostics,
    Field,
    ImmutableFieldError,
    ProviderSettings,
    ResourceData,
    Schema,
    errors_from,
    get_id_as_int,
    get_str_set_as_list,
    is_unknown,
    set_str_set,
)
from infra_bunny.lib.provider.validation import string_not_empty
from infra_bunny.lib.utils.last_updated import last_updated

logger = logging.getLogger(__name__)

REGIONS_REQUIRING_REPLICATION = ["SYD"]

IMMUTABLE_FIELDS = ["name", "region"]

# optional fields that are only sent when they changed, the API resets them otherwise
_CHANGED_ONLY_FIELDS = ["origin_url", "custom_404_file_path", "rewrite_404_to_200"]

storage_zone_schema = Schema(
    name=Field(str, "The name of the storage zone.", required=True, validate=string_not_empty),
    region=Field(
        str,
        "The code of the main storage zone region (Possible values: DE, NY, LA, SG, SYD).",
        required=True,
        validate=string_not_empty,
    ),
    replication_regions=Field(
        set,
        "The codes of the regions the storage zone is replicated to. Regions can be added but not removed.",
        elem=str,
        optional=True,
    ),
    origin_url=Field(str, "The origin URL of the storage zone.", optional=True),
    custom_404_file_path=Field(
        str,
        "The path to the custom file that will be returned in a case of 404.",
        optional=True,
    ),
    rewrite_404_to_200=Field(bool, "Rewrite 404 status code to 200 for URLs without extension.", optional=True),
    user_id=Field(str, "The ID of the user owning the storage zone.", computed=True),
    password=Field(
        str,
        "The password granting read/write access to the storage zone.",
        computed=True,
        sensitive=True,
    ),
    read_only_password=Field(
        str,
        "The password granting read-only access to the storage zone.",
        computed=True,
        sensitive=True,
    ),
    date_modified=Field(str, "The last modified date of the storage zone.", computed=True),
    deleted=Field(bool, "Determines if the storage zone is deleted.", computed=True),
    storage_used=Field(int, "The amount of storage used in the storage zone in bytes.", computed=True),
    files_stored=Field(int, "The number of files stored in the storage zone.", computed=True),
    last_updated=Field(str, "The time of the last update of the storage zone.", computed=True),
)


def validate_regions(region: Optional[str], replication_regions: Optional[list[str]]) -> list[tuple[str, str]]:
    """Check the replication of the storage zone regions

    :return: A list of ``(field, reason)`` tuples
    """
    if is_unknown(region) or is_unknown(replication_regions):
        return []

    failures = []
    replicas = [r.upper() for r in replication_regions or [] if isinstance(r, str)]

    if isinstance(region, str) and region.upper() in REGIONS_REQUIRING_REPLICATION and not replicas:
        failures.append(
            ("replication_regions", f'"{region}" region needs to have at least one replication region')
        )

    if isinstance(region, str) and region.upper() in replicas:
        failures.append(
            ("replication_regions", f'"{region}" is the main region and can not be a replication region')
        )

    return failures


def check_storage_zone_immutable(olds: dict, news: dict) -> None:
    """Reject changes to an existing storage zone that would require recreating it and lose its files

    Replication regions can be added, but not removed.

    :param olds: The stored state
    :param news: The new inputs
    :raises ImmutableFieldError: A forbidden change was made
    """
    for key in IMMUTABLE_FIELDS:
        old, new = olds.get(key), news.get(key)
        if old is not None and new is not None and not is_unknown(new) and old != new:
            raise ImmutableFieldError(f"'{key}' is immutable")

    if is_unknown(news.get("replication_regions")):
        return

    old_regions = {r.upper() for r in olds.get("replication_regions") or []}
    new_regions = {r.upper() for r in news.get("replication_regions") or [] if isinstance(r, str)}

    if removed := old_regions - new_regions:
        raise ImmutableFieldError(
            f"'replication_regions' can be added but not removed, removed: {', '.join(sorted(removed))}"
        )


def storage_zone_to_resource(sz: models.StorageZone, d: ResourceData) -> None:
    if sz.id is not None:
        d.set_id(sz.id)

    d.set("user_id", sz.user_id)
    d.set("name", sz.name)
    d.set("password", sz.password)
    d.set("date_modified", sz.date_modified)
    d.set("deleted", sz.deleted)
    d.set("storage_used", sz.storage_used)
    d.set("files_stored", sz.files_stored)
    d.set("region", sz.region)
    d.set("read_only_password", sz.read_only_password)

    set_str_set(d, "replication_regions", sz.replication_regions, ignore_order=True, case_insensitive=True)


def storage_zone_from_resource(d: ResourceData) -> models.StorageZoneUpdateOptions:
    res = models.StorageZoneUpdateOptions(replication_regions=get_str_set_as_list(d, "replication_regions"))

    for key in _CHANGED_ONLY_FIELDS:
        if d.has_change(key):
            setattr(res, key, d.get(key))

    return res


def _revert_update_values(d: ResourceData) -> None:
    """Restore the previous values of the fields that are only sent on change, so the next update sends them again"""
    for key in _CHANGED_ONLY_FIELDS:
        old, _ = d.get_change(key)
        d.set(key, old)


def create_storage_zone(client: Client, d: ResourceData) -> Diagnostics:
    try:
        sz = client.storage_zone.add(
            models.StorageZoneAddOptions(
                name=d.get("name"),
                origin_url=d.get("origin_url") if d.has_change("origin_url") else None,
                region=d.get("region"),
                replication_regions=get_str_set_as_list(d, "replication_regions"),
            )
        )
    except API_ERRORS as e:
        return Diagnostics().error(f"creating storage zone failed: {e}")

    d.set_id(sz.id)
    d.set("last_updated", last_updated())

    # the add endpoint only accepts a subset of the fields, the remaining ones are set via update
    diags = update_storage_zone(client, d)
    if diags.has_error():
        diags.error("setting storage zone attributes via update failed")

        try:
            storage_zone_to_resource(sz, d)
        except ValueError as e:
            diags.error(f"converting api-type to resource data failed: {e}")

    return diags


def update_storage_zone(client: Client, d: ResourceData) -> Diagnostics:
    opts = storage_zone_from_resource(d)

    try:
        storage_zone_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        client.storage_zone.update(storage_zone_id, opts)
    except API_ERRORS as e:
        _revert_update_values(d)
        return errors_from("updating storage zone via API failed", e)

    # the update endpoint does not return the storage zone
    try:
        updated = client.storage_zone.get(storage_zone_id)
    except API_ERRORS as e:
        return errors_from("fetching updated storage zone via API failed", e)

    try:
        storage_zone_to_resource(updated, d)
    except ValueError as e:
        return errors_from("converting api type to resource data after successful update failed", e)

    d.set("last_updated", last_updated())

    return Diagnostics()


def read_storage_zone(client: Client, d: ResourceData) -> Diagnostics:
    try:
        storage_zone_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        sz = client.storage_zone.get(storage_zone_id)
    except API_ERRORS as e:
        return errors_from("could not retrieve storage zone", e)

    try:
        storage_zone_to_resource(sz, d)
    except ValueError as e:
        return errors_from("converting api type to resource data after successful read failed", e)

    return Diagnostics()


def delete_storage_zone(client: Client, d: ResourceData) -> Diagnostics:
    try:
        storage_zone_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        client.storage_zone.delete(storage_zone_id)
    except API_ERRORS as e:
        return errors_from("could not delete storage zone", e)

    d.set_id("")

    return Diagnostics()


class StorageZoneProvider(BunnyResourceProvider):
    """Dynamic provider of `bunny_storagezone` resources"""

    schema = storage_zone_schema
    entity = "storage zone"

    def validate(self, inputs: dict) -> list[tuple[str, str]]:
        return validate_regions(inputs.get("region"), inputs.get("replication_regions"))

    def customize_diff(self, olds: dict, news: dict) -> None:
        check_storage_zone_immutable(olds, news)

    def create_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return create_storage_zone(client, d)

    def read_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return read_storage_zone(client, d)

    def update_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return update_storage_zone(client, d)

    def delete_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return delete_storage_zone(client, d)


class StorageZone(BunnyResource):
    def __init__(
        self,
        resource_name: str,
        props: dict,
        settings: ProviderSettings,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__(StorageZoneProvider(settings), resource_name, props, opts)
