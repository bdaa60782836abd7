import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from infra_bunny.lib.client import APIError, Client
from infra_bunny.lib.provider import Field, Schema, StateChangeConf

logger = logging.getLogger(__name__)

STATE_WAITING_FOR_DNS_RECORD = "waiting_for_dns_record"
STATE_CERTIFICATE_LOADED = "certificate_loaded"

LOAD_FREE_CERTIFICATE_MIN_DELAY = 5.0
"""Seconds between two attempts to load a free certificate"""

DNS_NOT_POINTING_MESSAGE = "is not pointing to our servers"


@dataclass
class Certificate:
    certificate_data: Optional[str] = None
    """The PEM encoded certificate"""

    private_key_data: Optional[str] = None
    """The PEM encoded private key"""


certificate_schema = Schema(
    certificate_data=Field(str, "The public key.", required=True, force_new=True),
    private_key_data=Field(str, "The private key.", required=True, force_new=True, sensitive=True),
)


def upload_certificate(client: Client, pull_zone_id: int, hostname: str, certificate: Certificate) -> None:
    client.pull_zone.add_custom_certificate(
        pull_zone_id,
        hostname,
        certificate.certificate_data.encode(),
        certificate.private_key_data.encode(),
    )


def is_dns_not_pointing_error(err: Exception) -> bool:
    """Whether ``err`` reports that the CNAME record of the hostname does not point to the CDN yet"""
    return isinstance(err, APIError) and DNS_NOT_POINTING_MESSAGE in (err.message or "").lower()


def load_free_certificate(
    client: Client,
    hostname: str,
    timeout: float,
    cancel: Optional[threading.Event] = None,
    sleep: Optional[Callable[[float], None]] = None,
    clock: Optional[Callable[[], float]] = None,
) -> None:
    """
    Request a free certificate for ``hostname``, retrying while its DNS record does not point to the CDN.

    The certificate can only be issued once the CNAME record of the hostname resolves to the pull zone, until then
    the API rejects the request. Any other error aborts immediately.

    :param client: The API client
    :param hostname: The custom hostname
    :param timeout: Seconds to keep retrying
    :param cancel: Aborts the retries once it is set
    :param sleep: Replaces ``time.sleep`` between attempts
    :param clock: Replaces ``time.monotonic`` for the deadline
    :raises StateChangeTimeoutError: The DNS record was not pointing to the CDN before the timeout passed
    :raises StateChangeCancelledError: ``cancel`` was set
    :raises BunnyClientError: The API rejected the request for another reason
    """

    def refresh():
        try:
            client.pull_zone.load_free_certificate(hostname)
        except APIError as e:
            if not is_dns_not_pointing_error(e):
                raise
            logger.info("cname dns record missing for hostname %r", hostname)
            return None, STATE_WAITING_FOR_DNS_RECORD

        return None, STATE_CERTIFICATE_LOADED

    conf = StateChangeConf(
        refresh=refresh,
        pending=[STATE_WAITING_FOR_DNS_RECORD],
        target=[STATE_CERTIFICATE_LOADED],
        timeout=timeout,
        min_interval=LOAD_FREE_CERTIFICATE_MIN_DELAY,
        sleep=sleep,
        cancel=cancel,
    )
    if clock is not None:
        conf.clock = clock

    conf.wait()
