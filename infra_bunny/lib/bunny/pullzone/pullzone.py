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
    errors_from,
    get_id_as_int,
    get_int,
    get_ok_str,
    get_str_set_as_list,
    set_str_set,
    suppress_missing_optional_block,
)
from infra_bunny.lib.provider.validation import int_between, is_int32, one_of
from infra_bunny.lib.utils.last_updated import last_updated
from .headers import KEY_HEADERS, headers_from_resource, headers_schema, headers_to_resource
from .limits import KEY_LIMITS, limits_from_resource, limits_schema, limits_to_resource
from .optimizer import KEY_OPTIMIZER, optimizer_from_resource, optimizer_schema, optimizer_to_resource
from .safehop import KEY_SAFEHOP, safehop_from_resource, safehop_schema, safehop_to_resource

logger = logging.getLogger(__name__)

ORIGIN_SHIELD_ZONE_CODES = ["FR", "IL"]


def _block(elem: Schema, description: str) -> Field:
    return Field(
        list,
        description,
        elem=elem,
        optional=True,
        max_items=1,
        diff_suppress=suppress_missing_optional_block,
    )


def _toggle(description: str, default: Optional[bool] = False) -> Field:
    return Field(bool, description, optional=True, default=default)


pull_zone_schema = Schema(
    name=Field(str, "The name of the Pull Zone.", required=True, force_new=True),
    origin_url=Field(
        str,
        "The origin URL from where the Pull Zone files are pulled.",
        optional=True,
        computed=True,
        conflicts_with=("storage_zone_id",),
    ),
    storage_zone_id=Field(
        int,
        "The ID of the storage zone that the Pull Zone is linked to.",
        optional=True,
        computed=True,
        force_new=True,
    ),
    type=Field(
        int,
        "The pricing type of the Pull Zone, 0 = Standard, 1 = Volume.",
        optional=True,
        default=0,
        validate=int_between(0, 1),
    ),
    aws_signing_enabled=_toggle("Determines if the AWS signing is enabled."),
    aws_signing_key=Field(str, "The AWS signing key.", optional=True),
    aws_signing_region_name=Field(str, "The AWS signing region name.", optional=True),
    aws_signing_secret=Field(str, "The AWS signing secret.", optional=True, sensitive=True),
    allowed_referrers=Field(
        set,
        "The list of referrer hostnames that are allowed to access the Pull Zone. Requests containing the header "
        "Referer: hostname that is not on the list will be rejected. If empty, all the referrers are allowed.",
        elem=str,
        optional=True,
    ),
    blocked_referrers=Field(
        set,
        "The list of referrer hostnames that are not allowed to access the Pull Zone.",
        elem=str,
        optional=True,
        computed=True,
        force_new=True,
    ),
    blocked_countries=Field(
        set,
        "The list of two letter Alpha2 country codes that will be blocked from accessing the zone.",
        elem=str,
        optional=True,
    ),
    blocked_ips=Field(
        set,
        "The list of IPs that are blocked from accessing the Pull Zone.",
        elem=str,
        optional=True,
    ),
    budget_redirected_countries=Field(
        set,
        "The list of budget redirected countries with the two-letter Alpha2 ISO codes.",
        elem=str,
        optional=True,
    ),
    block_post_requests=_toggle("If true, POST requests to the zone will be blocked."),
    block_root_path_access=_toggle("If true, access to root path will return a 403 error."),
    cache_control_browser_max_age_override=Field(
        int,
        "Sets the browser cache control override setting for this zone, -1 respects the origin headers.",
        optional=True,
        default=-1,
    ),
    cache_control_max_age_override=Field(
        int,
        "Sets the cache control override setting for this zone, -1 respects the origin headers.",
        optional=True,
        default=-1,
    ),
    cache_error_responses=_toggle("If true, error responses from the origin are cached."),
    disable_cookies=_toggle("Determines if the cookies are disabled for the Pull Zone.", default=True),
    enable_avif_vary=_toggle("Determines if the AVIF Vary feature is enabled."),
    enable_cache_slice=_toggle("Determines if cache slicing (Optimize for video) should be enabled for this zone."),
    enable_country_code_vary=_toggle("Determines if the Country Code Vary feature is enabled."),
    enable_hostname_vary=_toggle("Determines if the Hostname Vary feature is enabled."),
    enable_logging=_toggle("Determines if the logging is enabled for this Pull Zone.", default=True),
    enable_mobile_vary=_toggle("Determines if the Mobile Vary feature is enabled."),
    enable_origin_shield=_toggle("Determines if the origin shield should be enabled."),
    enable_tlsv1=_toggle("Determines if the TLS 1.0 should be enabled on this zone.", default=True),
    enable_tls1_1=_toggle("Determines if the TLS 1.1 should be enabled on this zone.", default=True),
    enable_webp_vary=_toggle("Determines if the WebP Vary feature is enabled."),
    error_page_custom_code=Field(str, "Contains the custom error page code that will be returned.", optional=True),
    error_page_enable_custom_code=_toggle("Determines if custom error page code should be enabled."),
    error_page_enable_statuspage_widget=_toggle("Determines if the statuspage widget should be displayed on the error pages."),
    error_page_statuspage_code=Field(
        str,
        "The statuspage code that will be used to build the status widget.",
        optional=True,
    ),
    error_page_whitelabel=_toggle("Determines if the error pages should be whitelabel or not."),
    follow_redirects=_toggle("Determines if the zone will follow origin redirects."),
    ignore_query_strings=_toggle("Determines if the Pull Zone should ignore query strings when serving cached objects.", default=True),
    log_forwarding_enabled=_toggle("Determines if the log forwarding is enabled."),
    log_forwarding_hostname=Field(str, "The log forwarding hostname.", optional=True),
    log_forwarding_port=Field(int, "The log forwarding port.", optional=True, default=0, validate=is_int32),
    log_forwarding_token=Field(str, "The log forwarding token value.", optional=True, sensitive=True),
    logging_ip_anonymization_enabled=_toggle("Determines if the log anonymization should be enabled.", default=True),
    logging_save_to_storage=Field(
        bool,
        "Determines if the logging permanent storage should be enabled.",
        optional=True,
        default=False,
        required_with=("logging_storage_zone_id",),
    ),
    logging_storage_zone_id=Field(
        int,
        "The ID of the logging storage zone that is configured for this Pull Zone.",
        optional=True,
        default=0,
    ),
    origin_shield_zone_code=Field(
        str,
        "The zone code of the origin shield.",
        optional=True,
        default="FR",
        validate=one_of(ORIGIN_SHIELD_ZONE_CODES),
    ),
    perma_cache_storage_zone_id=Field(
        int,
        "The ID of the storage zone that should be used as the Perma-Cache.",
        optional=True,
        default=0,
    ),
    verify_origin_ssl=_toggle("Determines if the Pull Zone should verify the origin SSL certificate."),
    zone_security_enabled=_toggle("True if the URL secure token authentication security is enabled."),
    zone_security_include_hash_remote_ip=_toggle(
        "True if the zone security hash should include the remote IP.",
        default=None,
    ),
    safehop=_block(safehop_schema, "The SafeHop origin retry settings."),
    headers=_block(headers_schema, "The CORS and origin header settings."),
    limits=_block(limits_schema, "The connection, request and bandwidth limits."),
    optimizer=_block(optimizer_schema, "The Bunny Optimizer settings."),
    cname_domain=Field(str, "The CNAME domain of the Pull Zone for setting up custom hostnames.", computed=True),
    enabled=Field(bool, "Determines if the Pull Zone is currently enabled.", computed=True),
    enable_geo_zone_af=Field(bool, "Determines if the delivery from the Africa region is enabled.", computed=True),
    enable_geo_zone_asia=Field(bool, "Determines if the delivery from the Asian / Oceanian region is enabled.", computed=True),
    enable_geo_zone_eu=Field(bool, "Determines if the delivery from the European region is enabled.", computed=True),
    enable_geo_zone_sa=Field(bool, "Determines if the delivery from the South American region is enabled.", computed=True),
    enable_geo_zone_us=Field(bool, "Determines if the delivery from the North American region is enabled.", computed=True),
    video_library_id=Field(int, "The ID of the video library that the zone is linked to.", computed=True),
    zone_security_key=Field(
        str,
        "The security key used for secure URL token authentication.",
        computed=True,
        sensitive=True,
    ),
    last_updated=Field(str, "The time of the last update of the Pull Zone.", computed=True),
)

# fields whose attribute names equal their key in both the PullZone and the PullZoneUpdateOptions API model
_MUTABLE_FIELDS = [
    "origin_url",
    "type",
    "aws_signing_enabled",
    "aws_signing_key",
    "aws_signing_region_name",
    "aws_signing_secret",
    "block_post_requests",
    "block_root_path_access",
    "cache_control_max_age_override",
    "cache_error_responses",
    "disable_cookies",
    "enable_avif_vary",
    "enable_cache_slice",
    "enable_country_code_vary",
    "enable_hostname_vary",
    "enable_logging",
    "enable_mobile_vary",
    "enable_origin_shield",
    "enable_tls1_1",
    "enable_webp_vary",
    "error_page_custom_code",
    "error_page_enable_custom_code",
    "error_page_enable_statuspage_widget",
    "error_page_statuspage_code",
    "error_page_whitelabel",
    "follow_redirects",
    "ignore_query_strings",
    "log_forwarding_enabled",
    "log_forwarding_hostname",
    "log_forwarding_port",
    "log_forwarding_token",
    "logging_ip_anonymization_enabled",
    "logging_save_to_storage",
    "logging_storage_zone_id",
    "origin_shield_zone_code",
    "perma_cache_storage_zone_id",
    "verify_origin_ssl",
    "zone_security_enabled",
    "zone_security_include_hash_remote_ip",
]

_COMPUTED_FIELDS = [
    "name",
    "storage_zone_id",
    "cname_domain",
    "enabled",
    "enable_geo_zone_af",
    "enable_geo_zone_asia",
    "enable_geo_zone_eu",
    "enable_geo_zone_sa",
    "enable_geo_zone_us",
    "video_library_id",
    "zone_security_key",
]


def pull_zone_to_resource(pz: models.PullZone, d: ResourceData) -> None:
    """Set the fields of ``d`` to the values of the API pull zone ``pz``"""
    if pz.id is not None:
        d.set_id(pz.id)

    for key in _MUTABLE_FIELDS + _COMPUTED_FIELDS:
        d.set(key, getattr(pz, key))

    d.set("enable_tlsv1", pz.enable_tls1)
    d.set("cache_control_browser_max_age_override", pz.cache_control_public_max_age_override)

    set_str_set(d, "allowed_referrers", pz.allowed_referrers, ignore_order=True, case_insensitive=True)
    set_str_set(d, "blocked_countries", pz.blocked_countries, ignore_order=True, case_insensitive=True)
    set_str_set(d, "blocked_ips", pz.blocked_ips, ignore_order=True)
    set_str_set(d, "blocked_referrers", pz.blocked_referrers, ignore_order=True, case_insensitive=True)
    set_str_set(
        d,
        "budget_redirected_countries",
        pz.budget_redirected_countries,
        ignore_order=True,
        case_insensitive=True,
    )

    d.set(KEY_SAFEHOP, safehop_to_resource(pz))
    d.set(KEY_HEADERS, headers_to_resource(pz))
    d.set(KEY_LIMITS, limits_to_resource(pz))
    d.set(KEY_OPTIMIZER, optimizer_to_resource(pz))


def pull_zone_from_resource(d: ResourceData) -> models.PullZoneUpdateOptions:
    """Build the update request for all mutable fields of ``d``

    :raises ValueError: A nested block can not be converted
    """
    res = models.PullZoneUpdateOptions(**{key: d.get(key) for key in _MUTABLE_FIELDS})

    res.enable_tls1 = d.get("enable_tlsv1")
    res.cache_control_browser_max_age_override = get_int(d, "cache_control_browser_max_age_override")

    # blocked_referrers can only be changed through the blocked referrer endpoints
    res.allowed_referrers = get_str_set_as_list(d, "allowed_referrers")
    res.blocked_countries = get_str_set_as_list(d, "blocked_countries")
    res.blocked_ips = get_str_set_as_list(d, "blocked_ips")
    res.budget_redirected_countries = get_str_set_as_list(d, "budget_redirected_countries")

    safehop_from_resource(res, d)
    headers_from_resource(res, d)
    limits_from_resource(res, d)
    optimizer_from_resource(res, d)

    return res


def read_pull_zone(client: Client, d: ResourceData) -> tuple[Optional[models.PullZone], Diagnostics]:
    """Fetch the pull zone identified by the id of ``d``"""
    try:
        pull_zone_id = get_id_as_int(d)
    except ValueError as e:
        return None, Diagnostics().error(str(e))

    try:
        return client.pull_zone.get(pull_zone_id), Diagnostics()
    except API_ERRORS as e:
        return None, errors_from("could not retrieve pull zone", e)


def create_pull_zone(client: Client, d: ResourceData) -> Diagnostics:
    try:
        pz = client.pull_zone.add(
            models.PullZoneAddOptions(
                name=d.get("name"),
                origin_url=get_ok_str(d, "origin_url"),
                storage_zone_id=get_int(d, "storage_zone_id"),
                type=get_int(d, "type"),
            )
        )
    except API_ERRORS as e:
        return Diagnostics().error(f"creating pull zone failed: {e}")

    d.set_id(pz.id)
    d.set("last_updated", last_updated())

    # the add endpoint only accepts a subset of the fields, the remaining ones are set via update
    diags = update_pull_zone(client, d)
    if diags.has_error():
        diags.error("setting pull zone attributes via update failed")

        try:
            pull_zone_to_resource(pz, d)
        except ValueError as e:
            diags.error(f"converting api-type to resource data failed: {e}")

    return diags


def update_pull_zone(client: Client, d: ResourceData) -> Diagnostics:
    try:
        opts = pull_zone_from_resource(d)
    except ValueError as e:
        return errors_from("converting resource to API type failed", e)

    try:
        pull_zone_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        updated = client.pull_zone.update(pull_zone_id, opts)
    except API_ERRORS as e:
        return errors_from("updating pull zone via API failed", e)

    try:
        pull_zone_to_resource(updated, d)
    except ValueError as e:
        return errors_from("converting api type to resource data after successful update failed", e)

    d.set("last_updated", last_updated())

    return Diagnostics()


def read_pull_zone_resource(client: Client, d: ResourceData) -> Diagnostics:
    pz, diags = read_pull_zone(client, d)
    if pz is None:
        return diags

    try:
        pull_zone_to_resource(pz, d)
    except ValueError as e:
        return errors_from("converting api type to resource data after successful read failed", e)

    return diags


def delete_pull_zone(client: Client, d: ResourceData) -> Diagnostics:
    try:
        pull_zone_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        client.pull_zone.delete(pull_zone_id)
    except API_ERRORS as e:
        return errors_from("could not delete pull zone", e)

    d.set_id("")

    return Diagnostics()


class PullZoneProvider(BunnyResourceProvider):
    """Dynamic provider of `bunny_pullzone` resources"""

    schema = pull_zone_schema
    entity = "pull zone"

    def validate(self, inputs: dict) -> list[tuple[str, str]]:
        if inputs.get("origin_url") is None and inputs.get("storage_zone_id") is None:
            return [("origin_url", 'one of "origin_url" or "storage_zone_id" must be specified')]
        return []

    def create_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return create_pull_zone(client, d)

    def read_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return read_pull_zone_resource(client, d)

    def update_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return update_pull_zone(client, d)

    def delete_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return delete_pull_zone(client, d)


class PullZone(BunnyResource):
    """
    A bunny.net Pull Zone.

    Example usage:
        zone = PullZone("assets", {"name": "assets", "origin_url": "https://origin.example.com"}, settings)
        pulumi.export("cname", zone.cname_domain)
    """

    def __init__(
        self,
        resource_name: str,
        props: dict,
        settings: ProviderSettings,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__(PullZoneProvider(settings), resource_name, props, opts)
