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
from infra_bunny.lib.provider.validation import each, is_int32, one_of, string_not_empty
from infra_bunny.lib.utils.last_updated import last_updated

logger = logging.getLogger(__name__)

REPLICATION_REGIONS = ["UK", "SE", "NY", "LA", "SG", "SY", "BR", "JH"]

IMMUTABLE_REPLICATION_REGIONS_MESSAGE = (
    "'{key}' can not be mutated.\n"
    "This error occurred when attempting to updates values \"{key}\" from '{old}' to '{new}'.\n"
    "To modify an existing '{key}' the 'bunny_videolibrary' must be deleted and recreated.\n"
    "WARNING: deleting a 'bunny_videolibrary' will also delete all the data it contains!"
)


def _int(description: str, default: Optional[int] = None) -> Field:
    return Field(int, description, optional=True, default=default, validate=is_int32)


def _str(description: str, default: Optional[str] = None) -> Field:
    return Field(str, description, optional=True, default=default)


def _bool(description: str, default: Optional[bool] = None) -> Field:
    return Field(bool, description, optional=True, default=default)


video_library_schema = Schema(
    name=Field(str, "The name of the video library.", required=True, validate=string_not_empty),
    replication_regions=Field(
        set,
        "The geo-replication regions of the underlying storage zone. Can not be changed after creation.",
        elem=str,
        optional=True,
        validate=each(one_of(REPLICATION_REGIONS)),
    ),
    watermark_position_left=_int("The left offset of the watermark position (in %)."),
    watermark_position_top=_int("The top offset of the watermark position (in %)."),
    watermark_width=_int("The width of the watermark (in %)."),
    watermark_height=_int("The height of the watermark (in %)."),
    enabled_resolutions=_str(
        "The comma separated list of enabled resolutions in the encoding.",
        default="240p,360p,480p,720p,1080p",
    ),
    vi_ai_publisher_id=_str("The vi.ai publisher ID for advertising configuration."),
    vast_tag_url=_str("The URL of the VAST tag endpoint for advertising configuration."),
    webhook_url=_str("The webhook URL of the video library."),
    captions_font_size=_int("The captions display font size."),
    captions_font_color=_str("The captions display font color."),
    captions_background=_str("The captions display background color."),
    ui_language=_str("The UI language of the player."),
    allow_early_play=_bool("Determines if the Early-Play feature is enabled."),
    player_token_authentication_enabled=_bool(
        "Determines if the player token authentication is enabled."
    ),
    block_none_referrer=_bool("Determines if requests without a referrer are blocked.", default=True),
    enable_mp4_fallback=_bool("Determines if the MP4 fallback feature is enabled.", default=True),
    keep_original_files=_bool("Determines if the original video files are kept after encoding.", default=True),
    allow_direct_play=_bool("Determines if direct play URLs are enabled for the library.", default=True),
    enable_drm=_bool("Determines if the MediaCage basic DRM is enabled."),
    bitrate_240p=_int("The bitrate used for encoding 240p videos.", default=600),
    bitrate_360p=_int("The bitrate used for encoding 360p videos.", default=800),
    bitrate_480p=_int("The bitrate used for encoding 480p videos.", default=1400),
    bitrate_720p=_int("The bitrate used for encoding 720p videos.", default=2800),
    bitrate_1080p=_int("The bitrate used for encoding 1080p videos.", default=5000),
    bitrate_1440p=_int("The bitrate used for encoding 1440p videos.", default=8000),
    bitrate_2160p=_int("The bitrate used for encoding 2160p videos.", default=25000),
    show_heatmap=_bool("Determines if the video watch heatmap is displayed in the player."),
    enable_content_tagging=_bool("Determines if content tagging is enabled for the library.", default=True),
    custom_html=_str("The custom HTML that is added into the head of the HTML player."),
    controls=_str("The comma separated list of controls displayed in the video player."),
    player_key_color=_str("The key color of the player."),
    font_family=_str("The captions font family.", default="Rubik"),
    enable_token_authentication=_bool("Determines if the token authentication is enabled."),
    enable_token_ip_verification=_bool("Determines if the token IP verification is enabled."),
    reset_token=_bool("Determines if the token authentication key is regenerated on update."),
    video_count=Field(int, "The number of videos in the video library.", computed=True),
    traffic_usage=Field(int, "The amount of traffic usage this month.", computed=True),
    storage_usage=Field(int, "The total amount of storage used by the library.", computed=True),
    date_created=Field(str, "The date when the video library was created.", computed=True),
    api_key=Field(str, "The API key used for authenticating with the video library.", computed=True, sensitive=True),
    read_only_api_key=Field(
        str,
        "The read-only API key used for authenticating with the video library.",
        computed=True,
        sensitive=True,
    ),
    has_watermark=Field(bool, "Determines if the video library has a watermark configured.", computed=True),
    pull_zone_id=Field(int, "The ID of the connected underlying pull zone.", computed=True),
    storage_zone_id=Field(int, "The ID of the connected underlying storage zone.", computed=True),
    api_access_key=Field(str, "The API access key of the video library.", computed=True, sensitive=True),
    pull_zone_type=Field(int, "The pricing type of the underlying pull zone.", computed=True),
    allowed_referrers=Field(
        set,
        "The referrer hostnames that are allowed to access the library.",
        elem=str,
        computed=True,
    ),
    blocked_referrers=Field(
        set,
        "The referrer hostnames that are blocked from accessing the library.",
        elem=str,
        computed=True,
    ),
)

# keys that are attributes of both the VideoLibrary and the VideoLibraryUpdateOptions API model
_MUTABLE_FIELDS = [
    "name",
    "custom_html",
    "player_key_color",
    "watermark_position_left",
    "watermark_position_top",
    "watermark_width",
    "watermark_height",
    "enabled_resolutions",
    "vi_ai_publisher_id",
    "vast_tag_url",
    "webhook_url",
    "captions_font_size",
    "captions_font_color",
    "captions_background",
    "ui_language",
    "allow_early_play",
    "player_token_authentication_enabled",
    "block_none_referrer",
    "enable_mp4_fallback",
    "keep_original_files",
    "allow_direct_play",
    "enable_drm",
    "controls",
    "bitrate_240p",
    "bitrate_360p",
    "bitrate_480p",
    "bitrate_720p",
    "bitrate_1080p",
    "bitrate_1440p",
    "bitrate_2160p",
    "show_heatmap",
    "enable_content_tagging",
    "font_family",
]

# the API accepts these but never returns them
_WRITE_ONLY_FIELDS = ["enable_token_authentication", "enable_token_ip_verification", "reset_token"]

_COMPUTED_FIELDS = [
    "video_count",
    "traffic_usage",
    "storage_usage",
    "date_created",
    "api_key",
    "read_only_api_key",
    "has_watermark",
    "pull_zone_id",
    "storage_zone_id",
    "api_access_key",
    "pull_zone_type",
]


def check_video_library_immutable(olds: dict, news: dict) -> None:
    """Reject changing the replication regions of an existing video library

    :raises ImmutableFieldError: The replication regions differ
    """
    if is_unknown(news.get("replication_regions")):
        return

    old = sorted(r.upper() for r in olds.get("replication_regions") or [])
    new = sorted(r.upper() for r in news.get("replication_regions") or [] if isinstance(r, str))

    if old != new:
        raise ImmutableFieldError(
            IMMUTABLE_REPLICATION_REGIONS_MESSAGE.format(key="replication_regions", old=old, new=new)
        )


def video_library_to_resource(vl: models.VideoLibrary, d: ResourceData) -> None:
    if vl.id is not None:
        d.set_id(vl.id)

    for key in _MUTABLE_FIELDS + _COMPUTED_FIELDS:
        d.set(key, getattr(vl, key))

    set_str_set(d, "replication_regions", vl.replication_regions, ignore_order=True, case_insensitive=True)
    set_str_set(d, "allowed_referrers", vl.allowed_referrers, ignore_order=True, case_insensitive=True)
    set_str_set(d, "blocked_referrers", vl.blocked_referrers, ignore_order=True, case_insensitive=True)


def video_library_from_resource(d: ResourceData) -> models.VideoLibraryUpdateOptions:
    return models.VideoLibraryUpdateOptions(**{key: d.get(key) for key in _MUTABLE_FIELDS + _WRITE_ONLY_FIELDS})


def create_video_library(client: Client, d: ResourceData) -> Diagnostics:
    try:
        vl = client.video_library.add(
            models.VideoLibraryAddOptions(
                name=d.get("name"),
                replication_regions=get_str_set_as_list(d, "replication_regions"),
            )
        )
    except API_ERRORS as e:
        return Diagnostics().error(f"creating video library failed: {e}")

    d.set_id(vl.id)
    d.set("date_created", last_updated())

    # the add endpoint only accepts the name and the regions, the remaining fields are set via update
    diags = update_video_library(client, d)
    if diags.has_error():
        diags.error("setting video library attributes via update failed")

        try:
            video_library_to_resource(vl, d)
        except ValueError as e:
            diags.error(f"converting api-type to resource data failed: {e}")

    return diags


def update_video_library(client: Client, d: ResourceData) -> Diagnostics:
    opts = video_library_from_resource(d)

    try:
        video_library_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        updated = client.video_library.update(video_library_id, opts)
    except API_ERRORS as e:
        # the write-only fields can not be read back, they must not be stored as applied
        d.partial(True)
        return errors_from("updating video library via API failed", e)

    try:
        video_library_to_resource(updated, d)
    except ValueError as e:
        return errors_from("converting api type to resource data after successful update failed", e)

    return Diagnostics()


def read_video_library(client: Client, d: ResourceData) -> Diagnostics:
    try:
        video_library_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        vl = client.video_library.get(video_library_id, include_access_key=True)
    except API_ERRORS as e:
        return errors_from("could not retrieve video library", e)

    try:
        video_library_to_resource(vl, d)
    except ValueError as e:
        return errors_from("converting api type to resource data after successful read failed", e)

    return Diagnostics()


def delete_video_library(client: Client, d: ResourceData) -> Diagnostics:
    try:
        video_library_id = get_id_as_int(d)
    except ValueError as e:
        return Diagnostics().error(str(e))

    try:
        client.video_library.delete(video_library_id)
    except API_ERRORS as e:
        return errors_from("could not delete video library", e)

    d.set_id("")

    return Diagnostics()


class VideoLibraryProvider(BunnyResourceProvider):
    """Dynamic provider of `bunny_videolibrary` resources"""

    schema = video_library_schema
    entity = "video library"

    def customize_diff(self, olds: dict, news: dict) -> None:
        check_video_library_immutable(olds, news)

    def create_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return create_video_library(client, d)

    def read_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return read_video_library(client, d)

    def update_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return update_video_library(client, d)

    def delete_resource(self, client: Client, d: ResourceData) -> Diagnostics:
        return delete_video_library(client, d)


class VideoLibrary(BunnyResource):
    def __init__(
        self,
        resource_name: str,
        props: dict,
        settings: ProviderSettings,
        opts: Optional[ResourceOptions] = None,
    ):
        super().__init__(VideoLibraryProvider(settings), resource_name, props, opts)
