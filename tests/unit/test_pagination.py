"""Pagination index tests."""

import pytest

from mailterm.imap import MessageNotFoundError, PaginationIndex


def test_uids_are_sorted_newest_first_and_deduplicated() -> None:
    index = PaginationIndex([3, 10, 7, 3, 1])
    assert index.page_to_uid_slice(0) == [10, 7, 3, 1]
    assert len(index) == 4


def test_pages_slice_in_descending_order() -> None:
    index = PaginationIndex(range(1, 21))
    assert index.page_to_uid_slice(0) == [20, 19, 18, 17, 16, 15, 14, 13]
    assert index.page_to_uid_slice(1) == [12, 11, 10, 9, 8, 7, 6, 5]
    assert index.page_to_uid_slice(2) == [4, 3, 2, 1]


@pytest.mark.parametrize("page", [3, 50, -1])
def test_pages_out_of_range_are_empty(page: int) -> None:
    assert PaginationIndex(range(1, 21)).page_to_uid_slice(page) == []


def test_empty_mailbox_has_no_pages() -> None:
    index = PaginationIndex([])
    assert index.page_to_uid_slice(0) == []
    assert len(index) == 0


def test_page_size_override() -> None:
    index = PaginationIndex(range(1, 11), page_size=8)
    assert index.page_to_uid_slice(1, page_size=3) == [7, 6, 5]


def test_uid_at_maps_listing_positions() -> None:
    index = PaginationIndex([5, 9, 2])
    assert index.uid_at(0) == 9
    assert index.uid_at(2) == 2
    with pytest.raises(MessageNotFoundError):
        index.uid_at(3)
    with pytest.raises(MessageNotFoundError):
        index.uid_at(-1)


def test_non_positive_page_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        PaginationIndex([1], page_size=0)
