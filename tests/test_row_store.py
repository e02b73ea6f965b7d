"""Tests for the row store and its capacity limits."""

import pytest
from linepad.model import RowStore, is_printable


def create_store(rows, max_rows=1000, max_width=200):
    """Create a store holding the given rows."""
    store = RowStore(max_rows=max_rows, max_width=max_width)
    store.rows = list(rows)
    return store


def test_new_store_has_one_empty_row():
    store = RowStore()
    assert store.line_count() == 1
    assert store.line_length(0) == 0
    assert store.line_text(0) == ""


def test_insert_char_shifts_rest_of_row():
    store = create_store(["hllo"])
    assert store.insert_char(0, 1, 'e') is True
    assert store.line_text(0) == "hello"
    assert store.line_length(0) == 5


def test_insert_char_at_end_of_row():
    store = create_store(["ab"])
    assert store.insert_char(0, 2, 'c')
    assert store.line_text(0) == "abc"


def test_insert_non_printable_is_rejected():
    store = create_store(["ab"])
    for ch in ('\t', '\x1b', '\n', 'é', 'xy', ''):
        assert store.insert_char(0, 1, ch) is False
    assert store.line_text(0) == "ab"


def test_insert_into_full_row_is_noop():
    """A row at max_width - 1 columns accepts no more characters."""
    store = create_store(["abcd"], max_width=5)
    assert store.insert_char(0, 2, 'x') is False
    assert store.line_text(0) == "abcd"
    assert store.line_length(0) == 4


def test_insert_up_to_typing_limit():
    store = create_store(["abc"], max_width=5)
    assert store.insert_char(0, 3, 'd')
    assert store.insert_char(0, 4, 'e') is False
    assert store.line_text(0) == "abcd"


def test_delete_char():
    store = create_store(["hello"])
    assert store.delete_char(0, 0)
    assert store.line_text(0) == "ello"
    assert store.delete_char(0, 3)
    assert store.line_text(0) == "ell"


def test_delete_char_out_of_range_is_noop():
    store = create_store(["ab"])
    assert store.delete_char(0, 2) is False
    assert store.delete_char(0, -1) is False
    assert store.line_text(0) == "ab"


@pytest.mark.parametrize("col", [0, 1, 2, 3, 4])
def test_delete_then_insert_restores_row(col):
    store = create_store(["hello", "world"])
    ch = store.line_text(0)[col]
    assert store.delete_char(0, col)
    assert store.insert_char(0, col, ch)
    assert store.lines() == ["hello", "world"]


def test_split_moves_tail_to_new_row():
    store = create_store(["first", "hello world", "last"])
    assert store.split(1, 5)
    assert store.lines() == ["first", "hello", " world", "last"]
    assert store.line_count() == 4


def test_split_at_end_creates_empty_row():
    store = create_store(["hello"])
    assert store.split(0, 5)
    assert store.lines() == ["hello", ""]


def test_split_at_start_pushes_row_down():
    store = create_store(["hello"])
    assert store.split(0, 0)
    assert store.lines() == ["", "hello"]


def test_split_at_row_capacity_is_noop():
    store = create_store(["a", "bc"], max_rows=2)
    assert store.split(1, 1) is False
    assert store.lines() == ["a", "bc"]


def test_merge_joins_with_previous_row():
    store = create_store(["ab", "cd", "ef"])
    assert store.merge(1)
    assert store.lines() == ["abcd", "ef"]


def test_merge_first_row_is_noop():
    store = create_store(["ab", "cd"])
    assert store.merge(0) is False
    assert store.lines() == ["ab", "cd"]


def test_merge_up_to_max_width_is_allowed():
    store = create_store(["abc", "de"], max_width=5)
    assert store.merge(1)
    assert store.lines() == ["abcde"]


def test_merge_over_max_width_is_rejected():
    store = create_store(["abc", "def"], max_width=5)
    assert store.merge(1) is False
    assert store.lines() == ["abc", "def"]
    assert store.line_count() == 2


def test_lines_returns_copy():
    store = create_store(["a"])
    lines = store.lines()
    lines.append("b")
    assert store.line_count() == 1


def test_from_lines_empty_gives_one_row():
    store = RowStore.from_lines([])
    assert store.lines() == [""]


def test_from_lines_drops_rows_past_capacity():
    store = RowStore.from_lines(["a", "b", "c", "d"], max_rows=3)
    assert store.lines() == ["a", "b", "c"]


def test_from_lines_clips_wide_rows():
    store = RowStore.from_lines(["abcdefgh", "ok"], max_width=5)
    assert store.lines() == ["abcde", "ok"]
    assert store.line_length(0) == 5


def test_from_lines_drops_control_characters():
    store = RowStore.from_lines(["a\tb\r"])
    assert store.lines() == ["ab"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        RowStore(max_rows=0)


def test_is_printable():
    assert is_printable('a')
    assert is_printable(' ')
    assert is_printable('~')
    assert not is_printable('\x7f')
    assert not is_printable('\x00')
