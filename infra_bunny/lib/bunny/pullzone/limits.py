from dataclasses import dataclass
from typing import Optional

from infra_bunny.lib.client import PullZone, PullZoneUpdateOptions
from infra_bunny.lib.provider import Field, Schema, block_from_resource, flatten_block
from infra_bunny.lib.provider.validation import is_int32

KEY_LIMITS = "limits"


@dataclass
class Limits:
    connection_limit_per_ip_count: Optional[int] = None
    request_limit: Optional[int] = None
    monthly_bandwidth_limit: Optional[int] = None
    """Bytes per month, the zone is disabled when it is reached"""


limits_schema = Schema(
    connection_limit_per_ip_count=Field(
        int,
        "Limit the maximum number of allowed connections to the zone per IP. Set to 0 for unlimited.",
        optional=True,
        validate=is_int32,
    ),
    request_limit=Field(
        int,
        "Limit the maximum number of requests per second coming from a single IP. Set to 0 for unlimited.",
        optional=True,
        validate=is_int32,
    ),
    monthly_bandwidth_limit=Field(
        int,
        "Limits the allowed bandwidth used in a month, in Bytes. If the limit is reached the zone will be disabled.",
        optional=True,
    ),
)


def limits_to_resource(pz: PullZone) -> list[dict]:
    return flatten_block(
        Limits(
            connection_limit_per_ip_count=pz.connection_limit_per_ip_count,
            request_limit=pz.request_limit,
            monthly_bandwidth_limit=pz.monthly_bandwidth_limit,
        )
    )


def limits_from_resource(res: PullZoneUpdateOptions, d) -> None:
    limits = block_from_resource(d, KEY_LIMITS, Limits)
    if limits is None:
        return

    res.connection_limit_per_ip_count = limits.connection_limit_per_ip_count
    res.request_limit = limits.request_limit
    res.monthly_bandwidth_limit = limits.monthly_bandwidth_limit
