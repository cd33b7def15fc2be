"""Cursor pagination shared by the AWS listers.

Every lister wraps one remote call in a ``fetch_page(cursor)`` function that
returns a :class:`~cloudwatch_lens.models.Page`. The driver feeds each page's
cursor into the next call and stops when the cursor is missing or did not
advance. GetLogEvents keeps returning the same forward token once a stream is
exhausted, so the non-advancing check is what ends those loops.
"""

from typing import Callable, Iterator, List, Optional, TypeVar

from .models import Page

T = TypeVar("T")

FetchPage = Callable[[Optional[str]], Page]


def iter_pages(fetch_page: FetchPage) -> Iterator[Page]:
    """
    Yield pages until the remote stops handing out a new cursor.

    Args:
        fetch_page: Called with the previous page's cursor (None for the first page)

    Yields:
        Each page in request order
    """
    cursor: Optional[str] = None

    while True:
        page = fetch_page(cursor)
        yield page

        if not page.cursor or page.cursor == cursor:
            return
        cursor = page.cursor


def collect_pages(fetch_page: FetchPage, limit: Optional[int] = None) -> List[T]:
    """
    Concatenate the items of every page.

    Args:
        fetch_page: Page fetcher, see :func:`iter_pages`
        limit: Stop requesting pages once this many items are held

    Returns:
        At most ``limit`` items, in page order
    """
    items: List[T] = []

    for page in iter_pages(fetch_page):
        items.extend(page.items)
        if limit is not None and len(items) >= limit:
            return items[:limit]

    return items
