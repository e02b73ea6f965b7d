"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from curtsies.events import PasteEvent
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Keys unpacked from a paste event, served before reading more input
        self._pending_keys: list[str] = []
        # Virtual screen state for minimal updates
        self._last_lines: list[str] | None = None
        self._last_status: str | None = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input
            # Entering the Input context puts the tty in raw mode
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except (OSError, ValueError) as e:
                # The tty may already be gone; teardown must still finish
                logger.warning(f"Could not restore terminal input mode: {e}")
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def invalidate_frame(self) -> None:
        """Invalidate cached frame so next update does a full clear."""
        self._last_lines = None
        self._last_status = None

    def update_frame(self, lines: list[str], cursor_y: int, cursor_x: int,
                     status: str) -> None:
        """Diff against last frame and write only changes.

        Args:
            lines: Visible text, one entry per screen row above the status bar
            cursor_y: Cursor row on screen (0-based)
            cursor_x: Cursor column on screen (0-based)
            status: Text for the reverse-video status bar
        """
        width = self.term.width
        need_full_clear = (
            self._last_lines is None
            or len(self._last_lines) != len(lines)
        )
        if need_full_clear:
            print(self.term.home + self.term.clear, end='')
            self._last_lines = ["" for _ in range(len(lines))]
            self._last_status = None

        for y, line in enumerate(lines):
            display_line = line[:width].ljust(width)
            if display_line != self._last_lines[y]:
                print(self.term.move(y, 0) + display_line, end='')
                self._last_lines[y] = display_line

        status_text = status[:width].ljust(width)
        if status_text != self._last_status:
            print(self.term.move(self.term.height - 1, 0)
                  + self.term.reverse + status_text + self.term.normal, end='')
            self._last_status = status_text

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived in time
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._curtsies_input is None:
            return None
        # send() serves keys curtsies has already buffered before polling
        evt = self._curtsies_input.send(timeout)
        if evt is None:
            return None
        if isinstance(evt, PasteEvent):
            # A fast burst of input (usually a paste) arrives as one event
            self._pending_keys.extend(evt.events)
            return self._pending_keys.pop(0) if self._pending_keys else None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
