import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def is_printable(ch: str) -> bool:
    """Return True if ch is a single printable ASCII character."""
    return len(ch) == 1 and ' ' <= ch <= '~'


class RowStore:
    """Ordered rows of text with fixed capacity limits.

    The store always holds at least one row. Mutations that would break a
    capacity limit are rejected and return False; they never raise and
    never grow the store past ``max_rows`` rows or ``max_width`` columns.
    """

    rows: list[str]

    def __init__(self, max_rows: int = EditorConstants.MAX_ROWS,
                 max_width: int = EditorConstants.MAX_WIDTH):
        if max_rows < 1 or max_width < 1:
            raise ValueError("max_rows and max_width must be positive")
        self.max_rows = max_rows
        self.max_width = max_width
        self.rows = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str], max_rows: int = EditorConstants.MAX_ROWS,
                   max_width: int = EditorConstants.MAX_WIDTH) -> "RowStore":
        """Build a store from an ordered list of lines.

        Lines past ``max_rows`` are dropped and lines wider than
        ``max_width`` are clipped. Characters that cannot be typed
        (control characters such as tabs or carriage returns) are dropped.
        """
        store = cls(max_rows=max_rows, max_width=max_width)
        rows: list[str] = []
        dropped = 0
        for index, line in enumerate(lines):
            if len(rows) >= max_rows:
                dropped += 1
                continue
            clean = ''.join(ch for ch in line if is_printable(ch))
            if len(clean) != len(line):
                logger.warning(f"Row {index}: dropped {len(line) - len(clean)} non-printable characters")
            if len(clean) > max_width:
                logger.warning(f"Row {index}: clipped from {len(clean)} to {max_width} columns")
                clean = clean[:max_width]
            rows.append(clean)
        if dropped:
            logger.warning(f"Dropped {dropped} rows beyond the {max_rows} row limit")
        store.rows = rows or [""]
        return store

    # --- Read accessors ---

    def line_count(self) -> int:
        return len(self.rows)

    def line_length(self, row: int) -> int:
        return len(self.rows[row])

    def line_text(self, row: int) -> str:
        return self.rows[row]

    def lines(self) -> list[str]:
        """Return a copy of all rows in order."""
        return list(self.rows)

    # --- Mutations ---

    def insert_char(self, row: int, col: int, ch: str) -> bool:
        """Insert ch at col in row, shifting the rest of the row right.

        Returns:
            False if ch is not printable or the row is already at the
            typing limit (``max_width - 1``), True otherwise
        """
        if not is_printable(ch):
            return False
        text = self.rows[row]
        if len(text) >= self.max_width - 1:
            logger.debug(f"insert rejected: row {row} is full ({len(text)} columns)")
            return False
        if not 0 <= col <= len(text):
            return False
        self.rows[row] = text[:col] + ch + text[col:]
        return True

    def delete_char(self, row: int, col: int) -> bool:
        """Remove the character at col in row."""
        text = self.rows[row]
        if not 0 <= col < len(text):
            return False
        self.rows[row] = text[:col] + text[col + 1:]
        return True

    def split(self, row: int, col: int) -> bool:
        """Split row at col; the tail becomes a new row right after it."""
        if len(self.rows) >= self.max_rows:
            logger.debug(f"split rejected: buffer holds {len(self.rows)} rows")
            return False
        text = self.rows[row]
        if not 0 <= col <= len(text):
            return False
        self.rows[row:row + 1] = [text[:col], text[col:]]
        return True

    def merge(self, row: int) -> bool:
        """Append row to the row above it and remove row.

        Rejected when the joined row would be wider than ``max_width``.
        """
        if not 1 <= row < len(self.rows):
            return False
        joined = self.rows[row - 1] + self.rows[row]
        if len(joined) > self.max_width:
            logger.debug(f"merge rejected: rows {row - 1} and {row} would span {len(joined)} columns")
            return False
        self.rows[row - 1:row + 1] = [joined]
        return True


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


class Cursor:
    """Insertion point that moves within the shape of a RowStore.

    Movement never wraps between rows: left at column 0 and right at the
    end of a row do nothing. Vertical moves keep the column when the
    destination row is long enough and otherwise land at its end.
    """

    def __init__(self, store: RowStore, position: Optional[CursorPosition] = None):
        self.store = store
        self.position = position or CursorPosition()
        self.clamp()

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col

    def move_to(self, row: int, col: int):
        self.position = CursorPosition(row, col)
        self.clamp()

    def clamp(self):
        """Pull the position back inside the buffer."""
        last_row = self.store.line_count() - 1
        self.position.row = max(0, min(self.position.row, last_row))
        length = self.store.line_length(self.position.row)
        self.position.col = max(0, min(self.position.col, length))

    def move_left(self) -> bool:
        if self.position.col > 0:
            self.position.col -= 1
            return True
        return False

    def move_right(self) -> bool:
        if self.position.col < self.store.line_length(self.position.row):
            self.position.col += 1
            return True
        return False

    def move_up(self) -> bool:
        if self.position.row == 0:
            return False
        self.position.row -= 1
        self.position.col = min(self.position.col, self.store.line_length(self.position.row))
        return True

    def move_down(self) -> bool:
        if self.position.row >= self.store.line_count() - 1:
            return False
        self.position.row += 1
        self.position.col = min(self.position.col, self.store.line_length(self.position.row))
        return True
