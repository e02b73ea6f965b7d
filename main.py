#!/usr/bin/env python3
"""Linepad - A minimal full-screen editor for a single file.

Usage:
    python main.py <filename>

Controls:
    Arrow keys: Move the cursor
    Ctrl-S: Save file
    Ctrl-Q: Quit (asks for confirmation if there are unsaved changes)
    Type to insert text
    Backspace: Delete character or join with the previous line
    Enter: Split the line at the cursor
"""

from linepad.__main__ import main


if __name__ == "__main__":
    main()
