from dataclasses import dataclass
from typing import Optional

from infra_bunny.lib.client import PullZone, PullZoneUpdateOptions
from infra_bunny.lib.provider import (
    Field,
    Schema,
    block_from_resource,
    flatten_block,
    normalize_str_list,
    suppress_equivalent_str_list,
)

KEY_HEADERS = "headers"

EXTENSIONS_SEPARATOR = ","


@dataclass
class Headers:
    enable_access_control_origin_header: Optional[bool] = None
    access_control_origin_header_extensions: Optional[str] = None
    """Comma separated file extensions, e.g. ``eot, ttf, woff``"""

    add_canonical_header: Optional[bool] = None
    add_host_header: Optional[bool] = None


headers_schema = Schema(
    enable_access_control_origin_header=Field(
        bool,
        "Determines if the CORS headers listed in the access_control_origin_header_extensions attribute are applied",
        optional=True,
        default=True,
    ),
    access_control_origin_header_extensions=Field(
        str,
        "CORS Headers will be added to all requests of files with the listed extensions.",
        optional=True,
        default="eot, ttf, woff, woff2, css",
        diff_suppress=suppress_equivalent_str_list(EXTENSIONS_SEPARATOR),
    ),
    add_canonical_header=Field(
        bool,
        "Determines if the canonical header should be added by this zone.",
        optional=True,
    ),
    add_host_header=Field(
        bool,
        "If enabled, the original host header of the request will be forwarded to the origin server.",
        optional=True,
    ),
)


def headers_to_resource(pz: PullZone) -> list[dict]:
    extensions = normalize_str_list(EXTENSIONS_SEPARATOR.join(pz.access_control_origin_header_extensions or []))

    return flatten_block(
        Headers(
            enable_access_control_origin_header=pz.enable_access_control_origin_header,
            access_control_origin_header_extensions=", ".join(extensions),
            add_canonical_header=pz.add_canonical_header,
            add_host_header=pz.add_host_header,
        )
    )


def headers_from_resource(res: PullZoneUpdateOptions, d) -> None:
    headers = block_from_resource(d, KEY_HEADERS, Headers)
    if headers is None:
        return

    res.enable_access_control_origin_header = headers.enable_access_control_origin_header
    res.access_control_origin_header_extensions = normalize_str_list(
        headers.access_control_origin_header_extensions or "", EXTENSIONS_SEPARATOR
    )
    res.add_canonical_header = headers.add_canonical_header
    res.add_host_header = headers.add_host_header
