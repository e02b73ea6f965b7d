"""Main editor controller: drives a session from the terminal."""

import os
import select
import signal
from dataclasses import dataclass

from .constants import EditorConstants
from .keyboard import KeyboardHandler
from .session import EditorSession, RenderState
from .terminal import TerminalInterface


@dataclass
class Viewport:
    """Top-left buffer position shown on screen."""
    row_offset: int = 0
    col_offset: int = 0

    def scroll_to(self, cursor_row: int, cursor_col: int, rows: int, cols: int):
        """Move the viewport the least amount that keeps the cursor visible."""
        rows = max(1, rows)
        cols = max(1, cols)
        if cursor_row < self.row_offset:
            self.row_offset = cursor_row
        elif cursor_row >= self.row_offset + rows:
            self.row_offset = cursor_row - rows + 1
        if cursor_col < self.col_offset:
            self.col_offset = cursor_col
        elif cursor_col >= self.col_offset + cols:
            self.col_offset = cursor_col - cols + 1


def compose_frame(state: RenderState, viewport: Viewport, rows: int, cols: int):
    """Cut the visible part of a render state.

    Returns:
        (lines, cursor_y, cursor_x, status) in screen coordinates
    """
    cursor_row, cursor_col = state.cursor
    viewport.scroll_to(cursor_row, cursor_col, rows, cols)
    lines = []
    for y in range(rows):
        index = viewport.row_offset + y
        if index < len(state.rows):
            text, length = state.rows[index]
            lines.append(text[:length][viewport.col_offset:viewport.col_offset + cols])
        else:
            lines.append("")
    if state.message:
        status = f" {state.message}"
    else:
        status = EditorConstants.STATUS_HELP.format(state.status)
    return (lines, cursor_row - viewport.row_offset, cursor_col - viewport.col_offset, status)


class Editor:
    """Full-screen front end for an EditorSession."""

    def __init__(self, session: EditorSession, terminal: TerminalInterface = None):
        self.session = session
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.viewport = Viewport()
        self._resize_pipe_r = self._resize_pipe_w = None

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def draw(self):
        """Draw the current session state to the terminal."""
        lines, cursor_y, cursor_x, status = compose_frame(
            self.session.render_state(), self.viewport,
            self.terminal.height, self.terminal.width)
        self.terminal.update_frame(lines, cursor_y, cursor_x, status)

    def run(self):
        """Run the main editor loop until the session terminates.

        Raises:
            PersistenceError: if a save fails; the terminal is restored first
        """
        winch_installed = False
        try:
            self._resize_pipe_r, self._resize_pipe_w = os.pipe()
            self.terminal.setup()
            original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
            winch_installed = True
            self.draw()
            while self.session.running:
                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                if self._resize_pipe_r in ready:
                    os.read(self._resize_pipe_r, 1024)
                    self.terminal.invalidate_frame()
                if 0 in ready:
                    self._process_pending_keys()
                self.draw()
        finally:
            if winch_installed:
                signal.signal(signal.SIGWINCH, original_winch_handler)
            self._close_resize_pipe()
            self.terminal.cleanup()

    def _close_resize_pipe(self):
        for fd in (self._resize_pipe_r, self._resize_pipe_w):
            if fd is not None:
                os.close(fd)
        self._resize_pipe_r = self._resize_pipe_w = None

    def _process_pending_keys(self):
        """Handle every key event already available, one at a time."""
        while self.session.running:
            key_event = self.keyboard.get_key_event(timeout=0)
            if key_event is None:
                return
            self.session.handle_key(key_event)
