"""Editing session: the buffer, cursor, dirty flag and mode for one file.

The session is a plain value owned by whoever drives it. It consumes
KeyEvents, mutates the buffer through the command registry, and hands the
resulting state to a renderer through render_state(). It never draws and
never touches the terminal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import storage
from .commands import CommandRegistry
from .config import EditorConfig
from .constants import EditorConstants
from .edit_ops import EditOps
from .keyboard import KeyEvent, KeyType
from .model import Cursor, RowStore

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Operating modes of a session."""
    EDITING = "editing"
    CONFIRM_QUIT = "confirm_quit"
    TERMINATED = "terminated"


@dataclass
class RenderState:
    """Everything a renderer needs to paint one frame."""
    rows: list[tuple[str, int]]
    cursor: tuple[int, int]
    status: str
    mode: Mode
    message: Optional[str] = None


class EditorSession:
    """Single-file editing session."""

    def __init__(self, filename: str, config: Optional[EditorConfig] = None,
                 lines: Optional[list[str]] = None):
        self.filename = filename
        self.config = config or EditorConfig()
        if lines is None:
            self.store = RowStore(self.config.max_rows, self.config.max_width)
        else:
            self.store = RowStore.from_lines(lines, self.config.max_rows, self.config.max_width)
        self.cursor = Cursor(self.store)
        self.edit_ops = EditOps(self.store, self.cursor)
        self.command_registry = CommandRegistry()
        self.dirty = False
        self.mode = Mode.EDITING
        self.status_message: Optional[str] = None

    @classmethod
    def open(cls, filename: str, config: Optional[EditorConfig] = None) -> "EditorSession":
        """Create a session for filename, loading it if it exists.

        Raises:
            PersistenceError: if the file exists but cannot be read
        """
        return cls(filename, config=config, lines=storage.load_lines(filename))

    @property
    def running(self) -> bool:
        return self.mode != Mode.TERMINATED

    def handle_key(self, key_event: KeyEvent):
        """Process one key event to completion.

        Raises:
            PersistenceError: if a save request fails
        """
        if self.mode == Mode.TERMINATED:
            return
        if self.mode == Mode.CONFIRM_QUIT:
            self._handle_quit_confirm(key_event)
            return

        # Clear status message on any keypress
        self.status_message = None
        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            return
        if self.command_registry.execute(self, key_event):
            self.dirty = True

    def _handle_quit_confirm(self, key_event: KeyEvent):
        """Handle keypress during quit confirmation."""
        if key_event.key_type == KeyType.REGULAR:
            char = key_event.value.lower()
            if char == 'y':
                logger.info(f"Discarding unsaved changes to {self.filename}")
                self.mode = Mode.TERMINATED
            elif char == 'n':
                self.mode = Mode.EDITING
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            self.mode = Mode.EDITING

    def request_quit(self):
        """Quit now if clean, otherwise ask for confirmation."""
        if self.dirty:
            self.mode = Mode.CONFIRM_QUIT
        else:
            self.mode = Mode.TERMINATED

    def save(self):
        """Write the buffer to the session's file.

        Raises:
            PersistenceError: if the file cannot be written; the dirty
                flag is left set
        """
        lines = self.store.lines()
        storage.save_lines(self.filename, lines)
        self.dirty = False
        self.status_message = EditorConstants.SAVED_MESSAGE.format(len(lines), self.filename)

    @property
    def status(self) -> str:
        """File name, with a marker when there are unsaved changes."""
        if self.dirty:
            return f"{self.filename}{EditorConstants.DIRTY_MARKER}"
        return self.filename

    def render_state(self) -> RenderState:
        rows = [(self.store.line_text(i), self.store.line_length(i))
                for i in range(self.store.line_count())]
        if self.mode == Mode.CONFIRM_QUIT:
            message = EditorConstants.QUIT_CONFIRM_MESSAGE
        else:
            message = self.status_message
        return RenderState(
            rows=rows,
            cursor=self.cursor.position.as_tuple(),
            status=self.status,
            mode=self.mode,
            message=message,
        )
