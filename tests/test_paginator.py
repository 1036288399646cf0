"""Tests for repo_collect.retrieval.paginator covering limits, end-of-data and errors.

Run with:
    pytest tests/test_paginator.py --maxfail=1 -v --cov=repo_collect.retrieval.paginator --cov-report=term-missing
"""

from repo_collect.retrieval.paginator import fetch_all


def _pages(*pages):
    """Build a page_fetch over fixed pages, recording every page requested."""
    calls = []

    def page_fetch(page):
        calls.append(page)
        batch = pages[page - 1]
        next_page = page + 1 if page < len(pages) else None
        return batch, next_page

    return page_fetch, calls


def test_fetches_everything_when_unbounded():
    page_fetch, calls = _pages([1, 2], [3, 4], [5])
    records, error = fetch_all(page_fetch)
    assert records == [1, 2, 3, 4, 5]
    assert error is None
    assert calls == [1, 2, 3]


def test_truncates_to_limit_in_fetch_order():
    page_fetch, calls = _pages([1, 2], [3, 4], [5])
    records, error = fetch_all(page_fetch, limit=3)
    assert records == [1, 2, 3]
    assert error is None
    assert calls == [1, 2]


def test_limit_above_available_returns_all():
    page_fetch, _ = _pages([1, 2], [3])
    records, error = fetch_all(page_fetch, limit=10)
    assert records == [1, 2, 3]
    assert error is None


def test_limit_equal_to_page_boundary_fetches_one_more_page():
    page_fetch, calls = _pages([1, 2], [3, 4])
    records, _ = fetch_all(page_fetch, limit=2)
    assert records == [1, 2]
    assert calls == [1, 2]


def test_zero_limit_fetches_at_most_once():
    page_fetch, calls = _pages([1, 2], [3])
    records, error = fetch_all(page_fetch, limit=0)
    assert records == []
    assert error is None
    assert len(calls) <= 1


def test_error_returns_partial_records_with_error():
    boom = RuntimeError("boom")

    def page_fetch(page):
        if page == 2:
            raise boom
        return ["a", "b"], page + 1

    records, error = fetch_all(page_fetch)
    assert records == ["a", "b"]
    assert error is boom


def test_error_on_first_page_returns_empty():
    def page_fetch(page):
        raise ValueError("nope")

    records, error = fetch_all(page_fetch, limit=5)
    assert records == []
    assert isinstance(error, ValueError)


def test_zero_next_page_means_end_of_data():
    calls = []

    def page_fetch(page):
        calls.append(page)
        return ["x"], 0

    records, _ = fetch_all(page_fetch)
    assert records == ["x"]
    assert calls == [1]


def test_follows_advertised_page_numbers():
    calls = []
    pages = {1: (["a"], 5), 5: (["b"], None)}

    def page_fetch(page):
        calls.append(page)
        return pages[page]

    records, _ = fetch_all(page_fetch)
    assert records == ["a", "b"]
    assert calls == [1, 5]


def test_zero_limit_stops_after_empty_first_page():
    calls = []

    def page_fetch(page):
        calls.append(page)
        if page < 3:
            return [], page + 1
        return ["x"], None

    records, error = fetch_all(page_fetch, limit=0)
    assert records == []
    assert error is None
    assert calls == [1]
