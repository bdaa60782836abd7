from typing import Iterator

from .models import Page, VideoLibrary, VideoLibraryAddOptions, VideoLibraryUpdateOptions, from_wire
from .pagination import DEFAULT_PAGE, DEFAULT_PER_PAGE, decode_page, iter_pages, pagination_params


class VideoLibraryService:
    def __init__(self, client):
        self._client = client

    def add(self, opts: VideoLibraryAddOptions) -> VideoLibrary:
        return from_wire(VideoLibrary, self._client.request("POST", "/videolibrary", body=opts))

    def get(self, id: int, include_access_key: bool = False) -> VideoLibrary:
        """Fetch a video library, ``api_access_key`` is only returned when ``include_access_key`` is set"""
        params = {"includeAccessKey": "true"} if include_access_key else None
        return from_wire(VideoLibrary, self._client.request("GET", f"/videolibrary/{id}", params=params))

    def list(self, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE) -> Page:
        data = self._client.request("GET", "/videolibrary", params=pagination_params(page, per_page))
        return decode_page(VideoLibrary, data)

    def iter_all(self, per_page: int = DEFAULT_PER_PAGE) -> Iterator[VideoLibrary]:
        return iter_pages(self.list, per_page)

    def update(self, id: int, opts: VideoLibraryUpdateOptions) -> VideoLibrary:
        return from_wire(VideoLibrary, self._client.request("POST", f"/videolibrary/{id}", body=opts))

    def delete(self, id: int) -> None:
        self._client.request("DELETE", f"/videolibrary/{id}", expect_result=False)
