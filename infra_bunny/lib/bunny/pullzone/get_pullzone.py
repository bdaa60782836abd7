from typing import Optional

from infra_bunny.lib.client import Client, models

SHARED_FIELDS = [
    "name",
    "cname_domain",
    "storage_zone_id",
    "aws_signing_key",
    "aws_signing_region_name",
    "aws_signing_secret",
    "zone_security_enabled",
    "zone_security_include_hash_remote_ip",
    "zone_security_key",
]
"""Attributes of a pull zone that other stacks and resources can rely on"""

SENSITIVE_FIELDS = ["aws_signing_secret", "zone_security_key"]


def pull_zone_to_shared(pz: models.PullZone) -> dict:
    return {"pull_zone_id": pz.id, **{key: getattr(pz, key) for key in SHARED_FIELDS}}


def get_pullzone(client: Client, pull_zone_id: int) -> dict:
    """
    Look up an existing pull zone.

    :param client: The API client
    :param pull_zone_id: The ID of the pull zone
    :return: The pull zone id and its ``SHARED_FIELDS``
    """
    return pull_zone_to_shared(client.pull_zone.get(pull_zone_id))


def find_pullzone_by_name(client: Client, name: str) -> Optional[models.PullZone]:
    """Return the pull zone called ``name``, ``None`` if there is none"""
    return next((pz for pz in client.pull_zone.iter_all() if pz.name == name), None)
