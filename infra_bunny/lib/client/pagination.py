from typing import Callable, Iterator, Type, TypeVar

from .models import Page, from_wire

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 1000


def pagination_params(page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE) -> dict:
    """Query parameters for a List endpoint, values smaller than 1 fall back to the defaults"""
    return {
        "page": page if page >= 1 else DEFAULT_PAGE,
        "per_page": per_page if per_page >= 1 else DEFAULT_PER_PAGE,
    }


def decode_page(item_cls: Type[T], data: dict) -> Page:
    return Page(
        items=[from_wire(item_cls, item) for item in data.get("Items") or []],
        current_page=data.get("CurrentPage"),
        total_items=data.get("TotalItems"),
        has_more_items=data.get("HasMoreItems"),
    )


def iter_pages(list_page: Callable[[int, int], Page], per_page: int = DEFAULT_PER_PAGE) -> Iterator:
    """Yield every item of a paginated List endpoint

    Pages are requested starting at 1 until a reply has ``has_more_items`` unset or false.

    :param list_page: Function fetching one page, called with ``(page, per_page)``
    :param per_page: Number of items per page
    """
    page = DEFAULT_PAGE

    while True:
        result = list_page(page, per_page)
        yield from result.items

        if not result.has_more_items:
            return

        page += 1
