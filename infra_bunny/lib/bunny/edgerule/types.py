"""
Edge rule enumerations.

The API identifies action, trigger and matching types by integers, resources use the member names. Every integer the
API is known to return has a member, any other value is rejected with an ``EnumDecodeError``.
"""
from enum import Enum
from typing import Type, TypeVar

from infra_bunny.lib.provider import EnumDecodeError

E = TypeVar("E", bound=Enum)


class ActionType(Enum):
    force_ssl = 0
    redirect = 1
    origin_url = 2
    override_cache_time = 3
    block_request = 4
    set_response_header = 5
    set_request_header = 6
    force_download = 7
    disable_token_auth = 8
    enable_token_auth = 9
    override_cache_time_public = 10
    ignore_query_string = 11
    disable_optimizer = 12
    force_compression = 13
    set_status_code = 14
    bypass_perma_cache = 15


class TriggerType(Enum):
    url = 0
    request_header = 1
    response_header = 2
    url_extension = 3
    country_code = 4
    remote_ip = 5
    url_query_string = 6
    random_chance = 7


class MatchingType(Enum):
    any = 0
    all = 1
    none = 2


def names(enum: Type[Enum]) -> list[str]:
    return [member.name for member in enum]


def decode(enum: Type[E], value) -> E:
    """Convert a wire value into a member of ``enum``

    :raises EnumDecodeError: ``value`` has no member
    """
    try:
        return enum(value)
    except ValueError:
        raise EnumDecodeError(enum.__name__, value)


def encode(enum: Type[Enum], name: str) -> int:
    """Convert a member name into its wire value

    :raises ValueError: ``enum`` has no member called ``name``
    """
    try:
        return enum[name].value
    except KeyError:
        raise ValueError(f"unsupported {enum.__name__}: {name!r}")
