from unittest.mock import MagicMock

import pytest

from infra_bunny.lib.client import Page, PullZoneAddOptions
from infra_bunny.lib.client.pagination import iter_pages, pagination_params


class TestPaginationParams:
    """Tests for the query parameters of List endpoints."""

    @pytest.mark.parametrize(
        "page, per_page, expected",
        [
            (1, 1000, {"page": 1, "per_page": 1000}),
            (3, 25, {"page": 3, "per_page": 25}),
            (0, 0, {"page": 1, "per_page": 1000}),
            (-1, 10, {"page": 1, "per_page": 10}),
        ],
    )
    def test_values_below_one_fall_back_to_defaults(self, page, per_page, expected):
        """Page and per-page values smaller than 1 are replaced by 1 and 1000."""
        assert pagination_params(page, per_page) == expected


class TestIterPages:
    """Tests for walking all pages of a List endpoint."""

    def test_stops_when_no_more_items(self):
        """Pages are requested from 1 until a page reports no more items."""
        list_page = MagicMock(
            side_effect=[
                Page(items=[1, 2], has_more_items=True),
                Page(items=[3, 4], has_more_items=True),
                Page(items=[5], has_more_items=False),
            ]
        )

        assert list(iter_pages(list_page, per_page=2)) == [1, 2, 3, 4, 5]
        assert [call.args for call in list_page.call_args_list] == [(1, 2), (2, 2), (3, 2)]

    def test_missing_flag_ends_iteration(self):
        """A reply without the has-more flag is the last page."""
        list_page = MagicMock(return_value=Page(items=["a"]))

        assert list(iter_pages(list_page)) == ["a"]
        list_page.assert_called_once_with(1, 1000)

    def test_lazy(self):
        """Pages are only fetched while items are consumed."""
        list_page = MagicMock(return_value=Page(items=["a", "b"], has_more_items=True))

        pages = iter_pages(list_page)
        assert next(pages) == "a"

        list_page.assert_called_once()

    def test_fake_api_pages(self, client):
        """Walking all pull zones of the fake API visits each once."""
        for i in range(5):
            client.pull_zone.add(PullZoneAddOptions(name=f"zone-{i}", origin_url="https://example.com"))

        assert [pz.name for pz in client.pull_zone.iter_all(per_page=2)] == [f"zone-{i}" for i in range(5)]
        assert len(client.api.called("pull_zone.list")) == 3
