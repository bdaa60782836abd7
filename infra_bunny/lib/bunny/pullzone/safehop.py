from dataclasses import dataclass
from typing import Optional

from infra_bunny.lib.client import PullZone, PullZoneUpdateOptions
from infra_bunny.lib.provider import Field, Schema, block_from_resource, flatten_block, suppress_int_unset
from infra_bunny.lib.provider.validation import one_of

KEY_SAFEHOP = "safehop"


@dataclass
class SafeHop:
    enable: Optional[bool] = None
    """Retry failed requests to the origin in a round-robin fashion"""

    origin_connect_timeout: Optional[int] = None
    origin_response_timeout: Optional[int] = None
    origin_retries: Optional[int] = None
    origin_retry_5xx_response: Optional[bool] = None
    origin_retry_connection_timeout: Optional[bool] = None
    origin_retry_delay: Optional[int] = None
    origin_retry_response_timeout: Optional[bool] = None


safehop_schema = Schema(
    enable=Field(
        bool,
        "If enabled, SafeHop will attempt to retry failed requests to the origin in case of errors or connection "
        "failures in a round-robin fashion.",
        optional=True,
    ),
    origin_connect_timeout=Field(
        int,
        "The amount of seconds to wait when connecting to the origin. Otherwise the request will fail or retry.",
        optional=True,
        validate=one_of([3, 5, 10]),
        diff_suppress=suppress_int_unset,
    ),
    origin_response_timeout=Field(
        int,
        "The amount of seconds to wait when waiting for the origin reply. Otherwise the request will fail or retry.",
        optional=True,
        validate=one_of([5, 15, 30, 45, 60]),
        diff_suppress=suppress_int_unset,
    ),
    origin_retries=Field(
        int,
        "How many times the CDN re-attempts to connect to the origin before failing with a 502 or a 504 response.",
        optional=True,
        validate=one_of([0, 1, 2]),
    ),
    origin_retry_5xx_response=Field(
        bool,
        "Determines if we should retry the request in case of a 5XX response.",
        optional=True,
    ),
    origin_retry_connection_timeout=Field(
        bool,
        "Determines if we should retry the request in case of a connection timeout.",
        optional=True,
        default=True,
    ),
    origin_retry_delay=Field(
        int,
        "Determines the amount of time that the CDN should wait before retrying an origin request.",
        optional=True,
        validate=one_of([0, 1, 3, 5, 10]),
        diff_suppress=suppress_int_unset,
    ),
    origin_retry_response_timeout=Field(
        bool,
        "Determines if we should retry the request in case of a response timeout.",
        optional=True,
        default=True,
    ),
)


def safehop_to_resource(pz: PullZone) -> list[dict]:
    return flatten_block(
        SafeHop(
            enable=pz.enable_safe_hop,
            origin_connect_timeout=pz.origin_connect_timeout,
            origin_response_timeout=pz.origin_response_timeout,
            origin_retries=pz.origin_retries,
            origin_retry_5xx_response=pz.origin_retry_5xx_responses,
            origin_retry_connection_timeout=pz.origin_retry_connection_timeout,
            origin_retry_delay=pz.origin_retry_delay,
            origin_retry_response_timeout=pz.origin_retry_response_timeout,
        )
    )


def safehop_from_resource(res: PullZoneUpdateOptions, d) -> None:
    safehop = block_from_resource(d, KEY_SAFEHOP, SafeHop)
    if safehop is None:
        return

    res.enable_safe_hop = safehop.enable
    res.origin_connect_timeout = safehop.origin_connect_timeout
    res.origin_response_timeout = safehop.origin_response_timeout
    res.origin_retries = safehop.origin_retries
    res.origin_retry_5xx_responses = safehop.origin_retry_5xx_response
    res.origin_retry_connection_timeout = safehop.origin_retry_connection_timeout
    res.origin_retry_delay = safehop.origin_retry_delay
    res.origin_retry_response_timeout = safehop.origin_retry_response_timeout
