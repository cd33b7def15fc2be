"""Tests for the cursor pagination driver."""

from cloudwatch_lens.models import Page
from cloudwatch_lens.pagination import collect_pages, iter_pages


class ScriptedFetcher:
    """Returns scripted pages and records the cursor of every call."""

    def __init__(self, pages):
        self.pages = list(pages)
        self.cursors = []

    def __call__(self, cursor):
        self.cursors.append(cursor)
        return self.pages[len(self.cursors) - 1]


class TestIterPages:
    """Test suite for iter_pages."""

    def test_stops_when_cursor_missing(self):
        """Test that a page without a cursor is the last one."""
        fetch = ScriptedFetcher(
            [
                Page(items=[1, 2], cursor="a"),
                Page(items=[3], cursor="b"),
                Page(items=[4], cursor=None),
            ]
        )

        pages = list(iter_pages(fetch))

        assert [p.items for p in pages] == [[1, 2], [3], [4]]
        assert fetch.cursors == [None, "a", "b"]

    def test_stops_on_empty_cursor(self):
        """Test that an empty-string cursor also ends pagination."""
        fetch = ScriptedFetcher([Page(items=[1], cursor="")])

        assert len(list(iter_pages(fetch))) == 1

    def test_stops_when_cursor_does_not_advance(self):
        """Test that a repeated cursor ends pagination after one extra call."""

        calls = []

        def fetch(cursor):
            calls.append(cursor)
            return Page(items=["x"], cursor="same")

        pages = list(iter_pages(fetch))

        assert calls == [None, "same"]
        assert len(pages) == 2

    def test_is_lazy(self):
        """Test that pages are only fetched as they are consumed."""
        fetch = ScriptedFetcher([Page(items=[1], cursor="a"), Page(items=[2])])

        next(iter_pages(fetch))

        assert fetch.cursors == [None]


class TestCollectPages:
    """Test suite for collect_pages."""

    def test_concatenates_in_page_order(self):
        """Test that items from every page are returned in order."""
        fetch = ScriptedFetcher([Page(items=[1, 2], cursor="a"), Page(items=[3])])

        assert collect_pages(fetch) == [1, 2, 3]

    def test_limit_stops_requests_early(self):
        """Test that reaching the limit stops further page requests."""
        fetch = ScriptedFetcher(
            [
                Page(items=[1, 2], cursor="a"),
                Page(items=[3, 4], cursor="b"),
                Page(items=[5, 6]),
            ]
        )

        assert collect_pages(fetch, limit=3) == [1, 2, 3]
        assert fetch.cursors == [None, "a"]

    def test_empty_first_page(self):
        """Test that a single empty page yields nothing."""
        fetch = ScriptedFetcher([Page()])

        assert collect_pages(fetch) == []
