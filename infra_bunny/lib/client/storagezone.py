from typing import Iterator

from .models import Page, StorageZone, StorageZoneAddOptions, StorageZoneUpdateOptions, from_wire
from .pagination import DEFAULT_PAGE, DEFAULT_PER_PAGE, decode_page, iter_pages, pagination_params


class StorageZoneService:
    def __init__(self, client):
        self._client = client

    def add(self, opts: StorageZoneAddOptions) -> StorageZone:
        return from_wire(StorageZone, self._client.request("POST", "/storagezone", body=opts))

    def get(self, id: int) -> StorageZone:
        return from_wire(StorageZone, self._client.request("GET", f"/storagezone/{id}"))

    def list(self, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE) -> Page:
        data = self._client.request("GET", "/storagezone", params=pagination_params(page, per_page))
        return decode_page(StorageZone, data)

    def iter_all(self, per_page: int = DEFAULT_PER_PAGE) -> Iterator[StorageZone]:
        return iter_pages(self.list, per_page)

    def update(self, id: int, opts: StorageZoneUpdateOptions) -> None:
        """Update a storage zone, the API replies without a body so callers must ``get`` the zone afterwards"""
        self._client.request("POST", f"/storagezone/{id}", body=opts, expect_result=False)

    def delete(self, id: int) -> None:
        self._client.request("DELETE", f"/storagezone/{id}", expect_result=False)
