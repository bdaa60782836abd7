from dataclasses import dataclass, field, fields, is_dataclass
from functools import cache
from typing import Any, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from dacite import Config, from_dict

T = TypeVar("T")


def wire(name: str) -> Any:
    """Declare an optional API field and the JSON key it is sent and received as

    Every API field defaults to ``None``, which means "absent": absent fields are omitted from request bodies so the
    remote side keeps its current (or default) value.
    """
    return field(default=None, metadata={"wire": name})


def _unwrap(type_: Any) -> Any:
    """Strip ``Optional[...]`` and return the element type of ``list[...]``"""
    if get_origin(type_) is Union:
        type_ = next(arg for arg in get_args(type_) if arg is not type(None))
    if get_origin(type_) is list:
        type_ = get_args(type_)[0]
    return type_


@cache
def _wire_fields(cls: type) -> list[tuple[str, str, Any]]:
    hints = get_type_hints(cls)
    return [(f.name, f.metadata.get("wire", f.name), _unwrap(hints[f.name])) for f in fields(cls)]


def _rename_from_wire(cls: type, data: dict) -> dict:
    renamed = {}
    for name, wire_name, inner in _wire_fields(cls):
        if wire_name not in data:
            continue
        value = data[wire_name]
        if is_dataclass(inner) and value is not None:
            if isinstance(value, list):
                value = [_rename_from_wire(inner, v) for v in value]
            else:
                value = _rename_from_wire(inner, value)
        renamed[name] = value
    return renamed


def from_wire(cls: Type[T], data: dict) -> T:
    """Decode an API JSON object into the dataclass ``cls``

    Keys unknown to ``cls`` are ignored, missing keys become ``None``.

    :param cls: API model dataclass
    :param data: Decoded JSON object
    :return: An instance of ``cls``
    """
    return from_dict(data_class=cls, data=_rename_from_wire(cls, data), config=Config(cast=[float]))


def to_wire(obj: Any) -> Any:
    """Encode an API model into a JSON-ready dict, omitting absent (``None``) fields"""
    if is_dataclass(obj):
        return {
            wire_name: to_wire(getattr(obj, name))
            for name, wire_name, _ in _wire_fields(type(obj))
            if getattr(obj, name) is not None
        }
    if isinstance(obj, list):
        return [to_wire(v) for v in obj]
    return obj


@dataclass
class Hostname:
    id: Optional[int] = wire("Id")
    value: Optional[str] = wire("Value")
    force_ssl: Optional[bool] = wire("ForceSSL")
    is_system_hostname: Optional[bool] = wire("IsSystemHostname")
    has_certificate: Optional[bool] = wire("HasCertificate")


@dataclass
class EdgeRuleTrigger:
    type: Optional[int] = wire("Type")
    pattern_matches: Optional[list[str]] = wire("PatternMatches")
    pattern_matching_type: Optional[int] = wire("PatternMatchingType")
    parameter_1: Optional[str] = wire("Parameter1")


@dataclass
class EdgeRule:
    guid: Optional[str] = wire("Guid")
    action_type: Optional[int] = wire("ActionType")
    action_parameter_1: Optional[str] = wire("ActionParameter1")
    action_parameter_2: Optional[str] = wire("ActionParameter2")
    triggers: Optional[list[EdgeRuleTrigger]] = wire("Triggers")
    trigger_matching_type: Optional[int] = wire("TriggerMatchingType")
    description: Optional[str] = wire("Description")
    enabled: Optional[bool] = wire("Enabled")


@dataclass
class AddOrUpdateEdgeRuleOptions:
    guid: Optional[str] = wire("Guid")
    action_type: Optional[int] = wire("ActionType")
    action_parameter_1: Optional[str] = wire("ActionParameter1")
    action_parameter_2: Optional[str] = wire("ActionParameter2")
    triggers: Optional[list[EdgeRuleTrigger]] = wire("Triggers")
    trigger_matching_type: Optional[int] = wire("TriggerMatchingType")
    description: Optional[str] = wire("Description")
    enabled: Optional[bool] = wire("Enabled")


@dataclass
class PullZone:
    """A Pull Zone as returned by the Get, List and Update Pull Zone endpoints

    Bunny.net API docs: https://docs.bunny.net/reference/pullzonepublic_index2
    """

    id: Optional[int] = wire("Id")
    name: Optional[str] = wire("Name")
    origin_url: Optional[str] = wire("OriginUrl")
    enabled: Optional[bool] = wire("Enabled")
    hostnames: Optional[list[Hostname]] = wire("Hostnames")
    edge_rules: Optional[list[EdgeRule]] = wire("EdgeRules")
    storage_zone_id: Optional[int] = wire("StorageZoneId")
    type: Optional[int] = wire("Type")
    video_library_id: Optional[int] = wire("VideoLibraryId")
    cname_domain: Optional[str] = wire("CnameDomain")
    aws_signing_enabled: Optional[bool] = wire("AWSSigningEnabled")
    aws_signing_key: Optional[str] = wire("AWSSigningKey")
    aws_signing_region_name: Optional[str] = wire("AWSSigningRegionName")
    aws_signing_secret: Optional[str] = wire("AWSSigningSecret")
    access_control_origin_header_extensions: Optional[list[str]] = wire("AccessControlOriginHeaderExtensions")
    add_canonical_header: Optional[bool] = wire("AddCanonicalHeader")
    add_host_header: Optional[bool] = wire("AddHostHeader")
    allowed_referrers: Optional[list[str]] = wire("AllowedReferrers")
    block_post_requests: Optional[bool] = wire("BlockPostRequests")
    block_root_path_access: Optional[bool] = wire("BlockRootPathAccess")
    blocked_countries: Optional[list[str]] = wire("BlockedCountries")
    blocked_ips: Optional[list[str]] = wire("BlockedIps")
    blocked_referrers: Optional[list[str]] = wire("BlockedReferrers")
    budget_redirected_countries: Optional[list[str]] = wire("BudgetRedirectedCountries")
    cache_control_max_age_override: Optional[int] = wire("CacheControlMaxAgeOverride")
    cache_control_public_max_age_override: Optional[int] = wire("CacheControlPublicMaxAgeOverride")
    cache_error_responses: Optional[bool] = wire("CacheErrorResponses")
    connection_limit_per_ip_count: Optional[int] = wire("ConnectionLimitPerIPCount")
    disable_cookies: Optional[bool] = wire("DisableCookies")
    enable_access_control_origin_header: Optional[bool] = wire("EnableAccessControlOriginHeader")
    enable_avif_vary: Optional[bool] = wire("EnableAvifVary")
    enable_cache_slice: Optional[bool] = wire("EnableCacheSlice")
    enable_country_code_vary: Optional[bool] = wire("EnableCountryCodeVary")
    enable_geo_zone_af: Optional[bool] = wire("EnableGeoZoneAF")
    enable_geo_zone_asia: Optional[bool] = wire("EnableGeoZoneASIA")
    enable_geo_zone_eu: Optional[bool] = wire("EnableGeoZoneEU")
    enable_geo_zone_sa: Optional[bool] = wire("EnableGeoZoneSA")
    enable_geo_zone_us: Optional[bool] = wire("EnableGeoZoneUS")
    enable_hostname_vary: Optional[bool] = wire("EnableHostnameVary")
    enable_logging: Optional[bool] = wire("EnableLogging")
    enable_mobile_vary: Optional[bool] = wire("EnableMobileVary")
    enable_origin_shield: Optional[bool] = wire("EnableOriginShield")
    enable_tls1: Optional[bool] = wire("EnableTLS1")
    enable_tls1_1: Optional[bool] = wire("EnableTLS1_1")
    enable_webp_vary: Optional[bool] = wire("EnableWebPVary")
    error_page_custom_code: Optional[str] = wire("ErrorPageCustomCode")
    error_page_enable_custom_code: Optional[bool] = wire("ErrorPageEnableCustomCode")
    error_page_enable_statuspage_widget: Optional[bool] = wire("ErrorPageEnableStatuspageWidget")
    error_page_statuspage_code: Optional[str] = wire("ErrorPageStatuspageCode")
    error_page_whitelabel: Optional[bool] = wire("ErrorPageWhitelabel")
    follow_redirects: Optional[bool] = wire("FollowRedirects")
    ignore_query_strings: Optional[bool] = wire("IgnoreQueryStrings")
    log_forwarding_enabled: Optional[bool] = wire("LogForwardingEnabled")
    log_forwarding_hostname: Optional[str] = wire("LogForwardingHostname")
    log_forwarding_port: Optional[int] = wire("LogForwardingPort")
    log_forwarding_token: Optional[str] = wire("LogForwardingToken")
    logging_ip_anonymization_enabled: Optional[bool] = wire("LoggingIPAnonymizationEnabled")
    logging_save_to_storage: Optional[bool] = wire("LoggingSaveToStorage")
    logging_storage_zone_id: Optional[int] = wire("LoggingStorageZoneId")
    monthly_bandwidth_limit: Optional[int] = wire("MonthlyBandwidthLimit")
    monthly_bandwidth_used: Optional[int] = wire("MonthlyBandwidthUsed")
    optimizer_automatic_optimization_enabled: Optional[bool] = wire("OptimizerAutomaticOptimizationEnabled")
    optimizer_desktop_max_width: Optional[int] = wire("OptimizerDesktopMaxWidth")
    optimizer_enable_manipulation_engine: Optional[bool] = wire("OptimizerEnableManipulationEngine")
    optimizer_enable_webp: Optional[bool] = wire("OptimizerEnableWebP")
    optimizer_enabled: Optional[bool] = wire("OptimizerEnabled")
    optimizer_image_quality: Optional[int] = wire("OptimizerImageQuality")
    optimizer_minify_css: Optional[bool] = wire("OptimizerMinifyCSS")
    optimizer_minify_javascript: Optional[bool] = wire("OptimizerMinifyJavaScript")
    optimizer_mobile_image_quality: Optional[int] = wire("OptimizerMobileImageQuality")
    optimizer_mobile_max_width: Optional[int] = wire("OptimizerMobileMaxWidth")
    optimizer_watermark_enabled: Optional[bool] = wire("OptimizerWatermarkEnabled")
    optimizer_watermark_min_image_size: Optional[int] = wire("OptimizerWatermarkMinImageSize")
    optimizer_watermark_offset: Optional[float] = wire("OptimizerWatermarkOffset")
    optimizer_watermark_position: Optional[int] = wire("OptimizerWatermarkPosition")
    optimizer_watermark_url: Optional[str] = wire("OptimizerWatermarkUrl")
    origin_connect_timeout: Optional[int] = wire("OriginConnectTimeout")
    origin_response_timeout: Optional[int] = wire("OriginResponseTimeout")
    origin_retries: Optional[int] = wire("OriginRetries")
    origin_retry_5xx_responses: Optional[bool] = wire("OriginRetry5XXResponses")
    origin_retry_connection_timeout: Optional[bool] = wire("OriginRetryConnectionTimeout")
    origin_retry_delay: Optional[int] = wire("OriginRetryDelay")
    origin_retry_response_timeout: Optional[bool] = wire("OriginRetryResponseTimeout")
    origin_shield_zone_code: Optional[str] = wire("OriginShieldZoneCode")
    enable_safe_hop: Optional[bool] = wire("EnableSafeHop")
    perma_cache_storage_zone_id: Optional[int] = wire("PermaCacheStorageZoneId")
    request_limit: Optional[int] = wire("RequestLimit")
    verify_origin_ssl: Optional[bool] = wire("VerifyOriginSSL")
    zone_security_enabled: Optional[bool] = wire("ZoneSecurityEnabled")
    zone_security_include_hash_remote_ip: Optional[bool] = wire("ZoneSecurityIncludeHashRemoteIP")
    zone_security_key: Optional[str] = wire("ZoneSecurityKey")


@dataclass
class PullZoneAddOptions:
    """Request body of the Add Pull Zone endpoint, which only accepts this subset of a pull zone's fields"""

    name: Optional[str] = wire("Name")
    origin_url: Optional[str] = wire("OriginUrl")
    storage_zone_id: Optional[int] = wire("StorageZoneId")
    type: Optional[int] = wire("Type")


@dataclass
class PullZoneUpdateOptions:
    """Request body of the Update Pull Zone endpoint

    Bunny.net API docs: https://docs.bunny.net/reference/pullzonepublic_updatepullzone
    """

    origin_url: Optional[str] = wire("OriginUrl")
    type: Optional[int] = wire("Type")
    aws_signing_enabled: Optional[bool] = wire("AWSSigningEnabled")
    aws_signing_key: Optional[str] = wire("AWSSigningKey")
    aws_signing_region_name: Optional[str] = wire("AWSSigningRegionName")
    aws_signing_secret: Optional[str] = wire("AWSSigningSecret")
    access_control_origin_header_extensions: Optional[list[str]] = wire("AccessControlOriginHeaderExtensions")
    add_canonical_header: Optional[bool] = wire("AddCanonicalHeader")
    add_host_header: Optional[bool] = wire("AddHostHeader")
    allowed_referrers: Optional[list[str]] = wire("AllowedReferrers")
    block_post_requests: Optional[bool] = wire("BlockPostRequests")
    block_root_path_access: Optional[bool] = wire("BlockRootPathAccess")
    blocked_countries: Optional[list[str]] = wire("BlockedCountries")
    blocked_ips: Optional[list[str]] = wire("BlockedIps")
    budget_redirected_countries: Optional[list[str]] = wire("BudgetRedirectedCountries")
    cache_control_max_age_override: Optional[int] = wire("CacheControlMaxAgeOverride")
    cache_control_browser_max_age_override: Optional[int] = wire("CacheControlBrowserMaxAgeOverride")
    cache_error_responses: Optional[bool] = wire("CacheErrorResponse")
    connection_limit_per_ip_count: Optional[int] = wire("ConnectionLimitPerIPCount")
    disable_cookies: Optional[bool] = wire("DisableCookies")
    enable_access_control_origin_header: Optional[bool] = wire("EnableAccessControlOriginHeader")
    enable_avif_vary: Optional[bool] = wire("EnableAvifVary")
    enable_cache_slice: Optional[bool] = wire("EnableCacheSlice")
    enable_country_code_vary: Optional[bool] = wire("EnableCountryCodeVary")
    enable_hostname_vary: Optional[bool] = wire("EnableHostnameVary")
    enable_logging: Optional[bool] = wire("EnableLogging")
    enable_mobile_vary: Optional[bool] = wire("EnableMobileVary")
    enable_origin_shield: Optional[bool] = wire("EnableOriginShield")
    enable_tls1: Optional[bool] = wire("EnableTLS1")
    enable_tls1_1: Optional[bool] = wire("EnableTLS1_1")
    enable_webp_vary: Optional[bool] = wire("EnableWebPVary")
    error_page_custom_code: Optional[str] = wire("ErrorPageCustomCode")
    error_page_enable_custom_code: Optional[bool] = wire("ErrorPageEnableCustomCode")
    error_page_enable_statuspage_widget: Optional[bool] = wire("ErrorPageEnableStatuspageWidget")
    error_page_statuspage_code: Optional[str] = wire("ErrorPageStatuspageCode")
    error_page_whitelabel: Optional[bool] = wire("ErrorPageWhitelabel")
    follow_redirects: Optional[bool] = wire("FollowRedirects")
    ignore_query_strings: Optional[bool] = wire("IgnoreQueryStrings")
    log_forwarding_enabled: Optional[bool] = wire("LogForwardingEnabled")
    log_forwarding_hostname: Optional[str] = wire("LogForwardingHostname")
    log_forwarding_port: Optional[int] = wire("LogForwardingPort")
    log_forwarding_token: Optional[str] = wire("LogForwardingToken")
    logging_ip_anonymization_enabled: Optional[bool] = wire("LoggingIPAnonymizationEnabled")
    logging_save_to_storage: Optional[bool] = wire("LoggingSaveToStorage")
    logging_storage_zone_id: Optional[int] = wire("LoggingStorageZoneId")
    monthly_bandwidth_limit: Optional[int] = wire("MonthlyBandwidthLimit")
    optimizer_automatic_optimization_enabled: Optional[bool] = wire("OptimizerAutomaticOptimizationEnabled")
    optimizer_desktop_max_width: Optional[int] = wire("OptimizerDesktopMaxWidth")
    optimizer_enable_manipulation_engine: Optional[bool] = wire("OptimizerEnableManipulationEngine")
    optimizer_enable_webp: Optional[bool] = wire("OptimizerEnableWebP")
    optimizer_enabled: Optional[bool] = wire("OptimizerEnabled")
    optimizer_image_quality: Optional[int] = wire("OptimizerImageQuality")
    optimizer_minify_css: Optional[bool] = wire("OptimizerMinifyCSS")
    optimizer_minify_javascript: Optional[bool] = wire("OptimizerMinifyJavaScript")
    optimizer_mobile_image_quality: Optional[int] = wire("OptimizerMobileImageQuality")
    optimizer_mobile_max_width: Optional[int] = wire("OptimizerMobileMaxWidth")
    optimizer_watermark_enabled: Optional[bool] = wire("OptimizerWatermarkEnabled")
    optimizer_watermark_min_image_size: Optional[int] = wire("OptimizerWatermarkMinImageSize")
    optimizer_watermark_offset: Optional[float] = wire("OptimizerWatermarkOffset")
    optimizer_watermark_position: Optional[int] = wire("OptimizerWatermarkPosition")
    optimizer_watermark_url: Optional[str] = wire("OptimizerWatermarkUrl")
    origin_connect_timeout: Optional[int] = wire("OriginConnectTimeout")
    origin_response_timeout: Optional[int] = wire("OriginResponseTimeout")
    origin_retries: Optional[int] = wire("OriginRetries")
    origin_retry_5xx_responses: Optional[bool] = wire("OriginRetry5XXResponses")
    origin_retry_connection_timeout: Optional[bool] = wire("OriginRetryConnectionTimeout")
    origin_retry_delay: Optional[int] = wire("OriginRetryDelay")
    origin_retry_response_timeout: Optional[bool] = wire("OriginRetryResponseTimeout")
    origin_shield_zone_code: Optional[str] = wire("OriginShieldZoneCode")
    enable_safe_hop: Optional[bool] = wire("EnableSafeHop")
    perma_cache_storage_zone_id: Optional[int] = wire("PermaCacheStorageZoneId")
    request_limit: Optional[int] = wire("RequestLimit")
    verify_origin_ssl: Optional[bool] = wire("VerifyOriginSSL")
    zone_security_enabled: Optional[bool] = wire("ZoneSecurityEnabled")
    zone_security_include_hash_remote_ip: Optional[bool] = wire("ZoneSecurityIncludeHashRemoteIP")


@dataclass
class AddCustomHostnameOptions:
    hostname: Optional[str] = wire("Hostname")


@dataclass
class RemoveCustomHostnameOptions:
    hostname: Optional[str] = wire("Hostname")


@dataclass
class SetForceSSLOptions:
    hostname: Optional[str] = wire("Hostname")
    force_ssl: Optional[bool] = wire("ForceSSL")


@dataclass
class AddCustomCertificateOptions:
    """Certificate and key are base64 encoded by the client before sending"""

    hostname: Optional[str] = wire("Hostname")
    certificate: Optional[str] = wire("Certificate")
    certificate_key: Optional[str] = wire("CertificateKey")


@dataclass
class RemoveCertificateOptions:
    hostname: Optional[str] = wire("Hostname")


@dataclass
class StorageZone:
    id: Optional[int] = wire("Id")
    user_id: Optional[str] = wire("UserId")
    name: Optional[str] = wire("Name")
    password: Optional[str] = wire("Password")
    date_modified: Optional[str] = wire("DateModified")
    deleted: Optional[bool] = wire("Deleted")
    storage_used: Optional[int] = wire("StorageUsed")
    files_stored: Optional[int] = wire("FilesStored")
    region: Optional[str] = wire("Region")
    replication_regions: Optional[list[str]] = wire("ReplicationRegions")
    pull_zones: Optional[list[PullZone]] = wire("PullZones")
    read_only_password: Optional[str] = wire("ReadOnlyPassword")
    origin_url: Optional[str] = wire("OriginUrl")
    custom_404_file_path: Optional[str] = wire("Custom404FilePath")
    rewrite_404_to_200: Optional[bool] = wire("Rewrite404To200")


@dataclass
class StorageZoneAddOptions:
    name: Optional[str] = wire("Name")
    origin_url: Optional[str] = wire("OriginUrl")
    region: Optional[str] = wire("Region")
    replication_regions: Optional[list[str]] = wire("ReplicationRegions")


@dataclass
class StorageZoneUpdateOptions:
    replication_regions: Optional[list[str]] = wire("ReplicationZones")
    origin_url: Optional[str] = wire("OriginUrl")
    custom_404_file_path: Optional[str] = wire("Custom404FilePath")
    rewrite_404_to_200: Optional[bool] = wire("Rewrite404To200")


@dataclass
class VideoLibrary:
    id: Optional[int] = wire("Id")
    name: Optional[str] = wire("Name")
    video_count: Optional[int] = wire("VideoCount")
    traffic_usage: Optional[int] = wire("TrafficUsage")
    storage_usage: Optional[int] = wire("StorageUsage")
    date_created: Optional[str] = wire("DateCreated")
    replication_regions: Optional[list[str]] = wire("ReplicationRegions")
    api_key: Optional[str] = wire("ApiKey")
    read_only_api_key: Optional[str] = wire("ReadOnlyApiKey")
    has_watermark: Optional[bool] = wire("HasWatermark")
    watermark_position_left: Optional[int] = wire("WatermarkPositionLeft")
    watermark_position_top: Optional[int] = wire("WatermarkPositionTop")
    watermark_width: Optional[int] = wire("WatermarkWidth")
    watermark_height: Optional[int] = wire("WatermarkHeight")
    pull_zone_id: Optional[int] = wire("PullZoneId")
    storage_zone_id: Optional[int] = wire("StorageZoneId")
    enabled_resolutions: Optional[str] = wire("EnabledResolutions")
    vi_ai_publisher_id: Optional[str] = wire("ViAiPublisherId")
    vast_tag_url: Optional[str] = wire("VastTagUrl")
    webhook_url: Optional[str] = wire("WebhookUrl")
    captions_font_size: Optional[int] = wire("CaptionsFontSize")
    captions_font_color: Optional[str] = wire("CaptionsFontColor")
    captions_background: Optional[str] = wire("CaptionsBackground")
    ui_language: Optional[str] = wire("UILanguage")
    allow_early_play: Optional[bool] = wire("AllowEarlyPlay")
    player_token_authentication_enabled: Optional[bool] = wire("PlayerTokenAuthenticationEnabled")
    allowed_referrers: Optional[list[str]] = wire("AllowedReferrers")
    blocked_referrers: Optional[list[str]] = wire("BlockedReferrers")
    block_none_referrer: Optional[bool] = wire("BlockNoneReferrer")
    enable_mp4_fallback: Optional[bool] = wire("EnableMP4Fallback")
    keep_original_files: Optional[bool] = wire("KeepOriginalFiles")
    allow_direct_play: Optional[bool] = wire("AllowDirectPlay")
    enable_drm: Optional[bool] = wire("EnableDRM")
    bitrate_240p: Optional[int] = wire("Bitrate240p")
    bitrate_360p: Optional[int] = wire("Bitrate360p")
    bitrate_480p: Optional[int] = wire("Bitrate480p")
    bitrate_720p: Optional[int] = wire("Bitrate720p")
    bitrate_1080p: Optional[int] = wire("Bitrate1080p")
    bitrate_1440p: Optional[int] = wire("Bitrate1440p")
    bitrate_2160p: Optional[int] = wire("Bitrate2160p")
    api_access_key: Optional[str] = wire("ApiAccessKey")
    show_heatmap: Optional[bool] = wire("ShowHeatmap")
    enable_content_tagging: Optional[bool] = wire("EnableContentTagging")
    pull_zone_type: Optional[int] = wire("PullZoneType")
    custom_html: Optional[str] = wire("CustomHTML")
    controls: Optional[str] = wire("Controls")
    player_key_color: Optional[str] = wire("PlayerKeyColor")
    font_family: Optional[str] = wire("FontFamily")


@dataclass
class VideoLibraryAddOptions:
    name: Optional[str] = wire("Name")
    replication_regions: Optional[list[str]] = wire("ReplicationRegions")


@dataclass
class VideoLibraryUpdateOptions:
    name: Optional[str] = wire("Name")
    custom_html: Optional[str] = wire("CustomHTML")
    player_key_color: Optional[str] = wire("PlayerKeyColor")
    enable_token_authentication: Optional[bool] = wire("EnableTokenAuthentication")
    enable_token_ip_verification: Optional[bool] = wire("EnableTokenIPVerification")
    reset_token: Optional[bool] = wire("ResetToken")
    watermark_position_left: Optional[int] = wire("WatermarkPositionLeft")
    watermark_position_top: Optional[int] = wire("WatermarkPositionTop")
    watermark_width: Optional[int] = wire("WatermarkWidth")
    watermark_height: Optional[int] = wire("WatermarkHeight")
    enabled_resolutions: Optional[str] = wire("EnabledResolutions")
    vi_ai_publisher_id: Optional[str] = wire("ViAiPublisherId")
    vast_tag_url: Optional[str] = wire("VastTagUrl")
    webhook_url: Optional[str] = wire("WebhookUrl")
    captions_font_size: Optional[int] = wire("CaptionsFontSize")
    captions_font_color: Optional[str] = wire("CaptionsFontColor")
    captions_background: Optional[str] = wire("CaptionsBackground")
    ui_language: Optional[str] = wire("UILanguage")
    allow_early_play: Optional[bool] = wire("AllowEarlyPlay")
    player_token_authentication_enabled: Optional[bool] = wire("PlayerTokenAuthenticationEnabled")
    block_none_referrer: Optional[bool] = wire("BlockNoneReferrer")
    enable_mp4_fallback: Optional[bool] = wire("EnableMP4Fallback")
    keep_original_files: Optional[bool] = wire("KeepOriginalFiles")
    allow_direct_play: Optional[bool] = wire("AllowDirectPlay")
    enable_drm: Optional[bool] = wire("EnableDRM")
    controls: Optional[str] = wire("Controls")
    bitrate_240p: Optional[int] = wire("Bitrate240p")
    bitrate_360p: Optional[int] = wire("Bitrate360p")
    bitrate_480p: Optional[int] = wire("Bitrate480p")
    bitrate_720p: Optional[int] = wire("Bitrate720p")
    bitrate_1080p: Optional[int] = wire("Bitrate1080p")
    bitrate_1440p: Optional[int] = wire("Bitrate1440p")
    bitrate_2160p: Optional[int] = wire("Bitrate2160p")
    show_heatmap: Optional[bool] = wire("ShowHeatmap")
    enable_content_tagging: Optional[bool] = wire("EnableContentTagging")
    font_family: Optional[str] = wire("FontFamily")


@dataclass
class Page:
    """One page of a paginated List endpoint reply"""

    items: list
    current_page: Optional[int] = None
    total_items: Optional[int] = None
    has_more_items: Optional[bool] = None
