"""Linepad CLI entry point.

Allows running via `python -m linepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import EditorConstants
from .errors import PersistenceError, UsageError
from .version import get_version_string

USAGE = "Usage: linepad [--log FILE] <filename>"


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed key events until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            if ev.is_ctrl:
                parts.append("flags=ctrl")
            print(' '.join(parts), end='\r\n', flush=True)
    finally:
        term.cleanup()


def parse_args(args: list[str]) -> tuple[str, Optional[str]]:
    """Validate the command line.

    Returns:
        (filename, log_file)

    Raises:
        UsageError: on a missing, extra or over-long file name
    """
    log_file = None
    positional = []
    i = 0
    while i < len(args):
        if args[i] == '--log':
            if i + 1 >= len(args):
                raise UsageError("--log needs a file name")
            log_file = args[i + 1]
            i += 2
            continue
        positional.append(args[i])
        i += 1
    if len(positional) != 1:
        raise UsageError(USAGE)
    filename = positional[0]
    if not filename or len(filename) > EditorConstants.FILENAME_MAX_LEN:
        raise UsageError(f"File name must be 1 to {EditorConstants.FILENAME_MAX_LEN} characters long")
    return filename, log_file


def configure_logging(log_file: Optional[str]) -> None:
    # The screen belongs to the editor, so log records only go to a file
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def main(argv: Optional[list[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    try:
        filename, log_file = parse_args(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    configure_logging(log_file)

    # Lazy import to avoid importing UI deps for --version
    from .config import load_config
    from .editor import Editor
    from .session import EditorSession

    try:
        session = EditorSession.open(filename, config=load_config())
    except PersistenceError as e:
        print(f"Error: cannot open {e.filename}: {e.reason}", file=sys.stderr)
        sys.exit(1)

    try:
        Editor(session).run()
    except PersistenceError as e:
        print(f"Error: cannot save to {e.filename}: {e.reason}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":  # pragma: no cover
    main()
