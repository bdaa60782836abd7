import logging
from typing import Optional

from pulumi import ResourceOptions

from infra_bunny.lib.client import API_ERRORS, Client, models
from infra_bunny.lib.provider import (
    BunnyResource,
    BunnyResourceProvider,
    Diagnostics,
    Field,
    ProviderSettings,
    ResourceData,
    Schema,
    block_from_resource,
    errors_from,
    get_id_as_int,
    get_int,
)
from infra_bunny.lib.provider.settings import DEFAULT_CREATE_TIMEOUT
from infra_bunny.lib.provider.state_change import StateChangeError
from .certificate import Certificate, certificate_schema, load_free_certificate, upload_certificate

logger = logging.getLogger(__name__)

hostname_schema = Schema(
    pull_zone_id=Field(int, "The ID of the pull zone to that the hostname belongs.", required=True, force_new=True),
    hostname=Field(str, "The hostname value for the domain name.", required=True, force_new=True),
    force_ssl=Field(bool, "Determines if the Force SSL feature is enabled.", optional=True, computed=True),
    load_free_certificate=Field(
        bool,
        "Determines if a free SSL certificate should be generated and loaded for the hostname.",
        optional=True,
        default=False,
        force_new=True,
    ),
    certificate=Field(
        list,
        "A custom SSL certificate for the hostname.",
        elem=certificate_schema,
        optional=True,
        max_items=1,
        force_new=True,
        sensitive=True,
    ),
    is_system_hostname=Field(bool, "Determines if this is a system hostname controlled by bunny.net.", computed=True),
    has_certificate=Field(bool, "Determines if the hostname has an SSL certificate configured.", computed=True),
)


def find_hostname_id(pz: models.PullZone, hostname: str) -> int:
    """Return the ID of the entry for ``hostname`` in the hostname list of ``pz``

    :raises LookupError: The pull zone has no such entry, or the entry has no ID
    """
    for entry in pz.hostnames or []:
        if entry.value is None:
            logger.warning("api returned pull zone (%s) with a hostname element without value", pz.id)
            continue

        if entry.value == hostname:
            if entry.id is None:
                raise LookupError("found hostname entry id is nil")
            return entry.id

    raise LookupError("hostname not found")


def get_hostname_id(client: Client, pull_zone_id: int, hostname: str) -> int:
    try:
        pz = client.pull_zone.get(pull_zone_id)
    except API_ERRORS as e:
        raise LookupError(f"retrieving pull zone failed: {e}")

    return find_hostname_id(pz, hostname)


def hostname_to_resource(hostname: models.Hostname, d: ResourceData) -> None:
    if hostname.id is None:
        raise ValueError("id is empty")

    d.set_id(hostname.id)
    d.set("hostname", hostname.value)
    d.set("force_ssl", hostname.force_ssl)
    d.set("is_system_hostname", hostname.is_system_hostname)
    d.set("has_certificate", hostname.has_certificate)


def _set_force_ssl(client: Client, d: ResourceData) -> Diagnostics:
    force_ssl = d.get("force_ssl")
    if force_ssl is None or not d.has_change("force_ssl"):
        return Diagnostics()

    try:
        client.pull_zone.set_force_ssl(get_int(d, "pull_zone_id"), d.get("hostname"), force_ssl)
    except API_ERRORS as e:
        return errors_from("setting force ssl failed", e)

    return Diagnostics()


def create_hostname(client: Client, d: ResourceData, timeout: float = DEFAULT_CREATE_TIMEOUT) -> Diagnostics:
    pull_zone_id = get_int(d, "pull_zone_id")
    hostname = d.get("hostname")

    try:
        client.pull_zone.add_custom_hostname(pull_zone_id, hostname)
    except API_ERRORS as e:
        return errors_from("could not add hostname", e)

    try:
        d.set_id(get_hostname_id(client, pull_zone_id, hostname))
    except LookupError as e:
        return errors_from("creating hostname succeeded, retrieving its ID afterwards failed", e)

    # the hostname exists from here on, its identifying inputs are stored even when configuring it fails
    for key in ("pull_zone_id", "hostname", "load_free_certificate", "certificate"):
        d.set(key, d.get(key))

    try:
        certificate = block_from_resource(d, "certificate", Certificate)
    except ValueError as e:
        return errors_from("creating hostname succeeded, reading the certificate failed", e)

    if certificate is not None:
        try:
            upload_certificate(client, pull_zone_id, hostname, certificate)
        except API_ERRORS as e:
            return errors_from("creating hostname succeeded, uploading the certificate failed", e)

    if d.get("load_free_certificate"):
        try:
            load_free_certificate(client, hostname, timeout)
        except API_ERRORS + (StateChangeError,) as e:
            return errors_from("creating hostname succeeded, loading free ssl certificate failed", e)

    diags = _set_force_ssl(client, d)
    if diags.has_error():
        return diags

    return read_hostname(client, d)


def read_hostname(client: Client, d: ResourceData) -> Diagnostics:
    try:
        hostname_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    pull_zone_id = get_int(d, "pull_zone_id")

    try:
        pz = client.pull_zone.get(pull_zone_id)
    except API_ERRORS as e:
        return errors_from("retrieving pull zone failed", e)

    if not pz.hostnames:
        return Diagnostics().error("pull zone has an empty hostname list")

    hostname = next((h for h in pz.hostnames if h.id == hostname_id), None)
    if hostname is None:
        return Diagnostics().error(
            "hostname not found",
            f"pull zone with id {pull_zone_id}, has no hostname with id: {hostname_id}",
        )

    try:
        hostname_to_resource(hostname, d)
    except ValueError as e:
        return errors_from("converting api hostname to resource data failed", e)

    return Diagnostics()


def update_hostname(client: Client, d: ResourceData) -> Diagnostics:
    diags = _set_force_ssl(client, d)
    if diags.has_error():
        return diags

    return read_hostname(client, d)


def delete_hostname(client: Client, d: ResourceData) -> Diagnostics:
    try:
        client.pull_zone.remove_custom_hostname(get_int(d, "pull_zone_id"), d.get("hostname"))
    except API_ERRORS as e:
        return errors_from("could not delete hostname", e)

    d.set_id("")

    return Diagnostics()


class HostnameProvider(BunnyResourceProvider):
    """Dynamic provider of `bunny_hostname` resources"""

    schema = hostname_schema
    entity = "hostname"

    def validate(self, inputs: dict) -> list[tuple[str, str]]:
        if inputs.get("load_free_certificate") is True and inputs.get("certificate"):
            return [("certificate", 'only one of "load_free_certificate" or "certificate" can be set')]
        return []

    def create_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return create_hostname(client, d, self.settings.create_timeout)

    def read_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return read_hostname(client, d)

    def update_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return update_hostname(client, d)

    def delete_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return delete_hostname(client, d)


class Hostname(BunnyResource):
    def __init__(
        self,
        resource_name: str,
        props: dict,
        settings: ProviderSettings,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__(HostnameProvider(settings), resource_name, props, opts)
