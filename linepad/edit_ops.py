"""Buffer edits performed at the cursor."""

from .model import Cursor, RowStore


class EditOps:
    """Coordinate RowStore mutations with cursor updates.

    Every operation returns True only when the buffer content changed, so
    the caller can decide whether the document became dirty.
    """

    def __init__(self, store: RowStore, cursor: Cursor):
        self.store = store
        self.cursor = cursor

    def type_char(self, ch: str) -> bool:
        pos = self.cursor.position
        if not self.store.insert_char(pos.row, pos.col, ch):
            return False
        pos.col += 1
        return True

    def newline(self) -> bool:
        pos = self.cursor.position
        if not self.store.split(pos.row, pos.col):
            return False
        pos.row += 1
        pos.col = 0
        return True

    def backspace(self) -> bool:
        """Delete the character before the cursor, or join with the row above.

        At the start of a row the row is merged into the previous one and
        the cursor lands at the old end of that row. If the merged row would
        be too wide nothing changes.
        """
        pos = self.cursor.position
        if pos.col > 0:
            if not self.store.delete_char(pos.row, pos.col - 1):
                return False
            pos.col -= 1
            return True
        if pos.row == 0:
            return False
        prev_len = self.store.line_length(pos.row - 1)
        if not self.store.merge(pos.row):
            return False
        pos.row -= 1
        pos.col = prev_len
        return True
