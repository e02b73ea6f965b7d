import os
import tempfile
from unittest.mock import patch

import pytest

from linepad.errors import PersistenceError
from linepad.model import RowStore
from linepad.storage import load_lines, parse_lines, save_lines, serialize_lines


def test_save_writes_newline_terminated_rows():
    """Each row is written followed by a newline."""
    with tempfile.TemporaryDirectory() as tmp:
        filename = os.path.join(tmp, "out.txt")
        save_lines(filename, ["First line", "", "Third line"])
        with open(filename, 'r', encoding='latin-1') as f:
            assert f.read() == "First line\n\nThird line\n"


def test_save_overwrites_existing(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("Old content that is longer")
    save_lines(str(path), ["New"])
    assert path.read_text() == "New\n"


def test_save_leaves_no_temp_files(tmp_path):
    save_lines(str(tmp_path / "out.txt"), ["a"])
    assert os.listdir(tmp_path) == ["out.txt"]


def test_save_failure_keeps_original(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("Original\n")
    with patch('linepad.storage.os.replace', side_effect=OSError(28, "No space left on device")):
        with pytest.raises(PersistenceError) as exc_info:
            save_lines(str(path), ["New"])
    assert exc_info.value.reason == "No space left on device"
    assert path.read_text() == "Original\n"
    assert os.listdir(tmp_path) == ["out.txt"]


def test_save_to_missing_directory(tmp_path):
    with pytest.raises(PersistenceError):
        save_lines(str(tmp_path / "nope" / "out.txt"), ["a"])


def test_load_missing_file_returns_no_rows(tmp_path):
    assert load_lines(str(tmp_path / "missing.txt")) == []


def test_load_three_line_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("a\nbb\nccc\n")
    assert load_lines(str(path)) == ["a", "bb", "ccc"]


def test_load_without_trailing_newline(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("a\nbb")
    assert load_lines(str(path)) == ["a", "bb"]


def test_parse_lines_edge_cases():
    assert parse_lines("") == []
    assert parse_lines("\n") == [""]
    assert parse_lines("\n\n") == ["", ""]
    assert parse_lines("a\n\n") == ["a", ""]


def test_serialize_lines():
    assert serialize_lines([""]) == "\n"
    assert serialize_lines(["a", "b"]) == "a\nb\n"


def test_bytes_map_to_single_columns(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"caf\xe9\n")
    lines = load_lines(str(path))
    assert lines == ["caf\xe9"]
    assert len(lines[0]) == 4


@pytest.mark.parametrize("rows", [
    [""],
    ["", ""],
    ["a", "bb", "ccc"],
    ["trailing", ""],
    ["", "leading"],
    ["  spaced  ", "~!@#$%^&*()"],
])
def test_save_then_load_round_trip(tmp_path, rows):
    path = str(tmp_path / "round.txt")
    store = RowStore.from_lines(rows)
    save_lines(path, store.lines())
    reloaded = RowStore.from_lines(load_lines(path))
    assert reloaded.lines() == store.lines()
    assert reloaded.line_count() == len(rows)


def test_load_truncates_oversized_file(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text("".join(f"{'x' * 12}\n" for _ in range(8)))
    store = RowStore.from_lines(load_lines(str(path)), max_rows=5, max_width=10)
    assert store.line_count() == 5
    assert all(store.line_length(i) == 10 for i in range(5))
