import base64
from typing import Iterator

from .models import (
    AddCustomCertificateOptions,
    AddCustomHostnameOptions,
    AddOrUpdateEdgeRuleOptions,
    Page,
    PullZone,
    PullZoneAddOptions,
    PullZoneUpdateOptions,
    RemoveCertificateOptions,
    RemoveCustomHostnameOptions,
    SetForceSSLOptions,
    from_wire,
)
from .pagination import DEFAULT_PAGE, DEFAULT_PER_PAGE, decode_page, iter_pages, pagination_params


class PullZoneService:
    """Pull Zone endpoints, including edge rules, hostnames and certificates of a pull zone"""

    def __init__(self, client):
        self._client = client

    def add(self, opts: PullZoneAddOptions) -> PullZone:
        return from_wire(PullZone, self._client.request("POST", "/pullzone", body=opts))

    def get(self, id: int) -> PullZone:
        return from_wire(PullZone, self._client.request("GET", f"/pullzone/{id}"))

    def list(self, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE) -> Page:
        data = self._client.request("GET", "/pullzone", params=pagination_params(page, per_page))
        return decode_page(PullZone, data)

    def iter_all(self, per_page: int = DEFAULT_PER_PAGE) -> Iterator[PullZone]:
        return iter_pages(self.list, per_page)

    def update(self, id: int, opts: PullZoneUpdateOptions) -> PullZone:
        return from_wire(PullZone, self._client.request("POST", f"/pullzone/{id}", body=opts))

    def delete(self, id: int) -> None:
        self._client.request("DELETE", f"/pullzone/{id}", expect_result=False)

    def add_or_update_edge_rule(self, pull_zone_id: int, opts: AddOrUpdateEdgeRuleOptions) -> None:
        """Create an edge rule, or update the one whose GUID is set in ``opts``

        The API does not return the GUID of a created rule.
        """
        self._client.request("POST", f"/pullzone/{pull_zone_id}/edgerules/addOrUpdate", body=opts, expect_result=False)

    def delete_edge_rule(self, pull_zone_id: int, guid: str) -> None:
        self._client.request("DELETE", f"/pullzone/{pull_zone_id}/edgerules/{guid}", expect_result=False)

    def add_custom_hostname(self, pull_zone_id: int, hostname: str) -> None:
        self._client.request(
            "POST",
            f"/pullzone/{pull_zone_id}/addHostname",
            body=AddCustomHostnameOptions(hostname=hostname),
            expect_result=False,
        )

    def remove_custom_hostname(self, pull_zone_id: int, hostname: str) -> None:
        self._client.request(
            "DELETE",
            f"/pullzone/{pull_zone_id}/removeHostname",
            body=RemoveCustomHostnameOptions(hostname=hostname),
            expect_result=False,
        )

    def set_force_ssl(self, pull_zone_id: int, hostname: str, force_ssl: bool) -> None:
        self._client.request(
            "POST",
            f"/pullzone/{pull_zone_id}/setForceSSL",
            body=SetForceSSLOptions(hostname=hostname, force_ssl=force_ssl),
            expect_result=False,
        )

    def load_free_certificate(self, hostname: str) -> None:
        self._client.request(
            "GET",
            "/pullzone/loadFreeCertificate",
            params={"hostname": hostname},
            expect_result=False,
        )

    def add_custom_certificate(self, pull_zone_id: int, hostname: str, certificate: bytes, key: bytes) -> None:
        """Upload a PEM certificate and private key for a hostname, both are sent base64 encoded"""
        self._client.request(
            "POST",
            f"/pullzone/{pull_zone_id}/addCertificate",
            body=AddCustomCertificateOptions(
                hostname=hostname,
                certificate=base64.b64encode(certificate).decode(),
                certificate_key=base64.b64encode(key).decode(),
            ),
            expect_result=False,
        )

    def remove_certificate(self, pull_zone_id: int, hostname: str) -> None:
        self._client.request(
            "DELETE",
            f"/pullzone/{pull_zone_id}/removeCertificate",
            body=RemoveCertificateOptions(hostname=hostname),
            expect_result=False,
        )
