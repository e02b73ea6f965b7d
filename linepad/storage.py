"""Loading and saving buffer content as newline-terminated text."""

import logging
import os
import tempfile

from .constants import EditorConstants
from .errors import PersistenceError

logger = logging.getLogger(__name__)


def parse_lines(content: str) -> list[str]:
    """Split file content into rows.

    A single trailing newline terminates the last row rather than starting
    a new one, so "a\\nbb\\n" is two rows. Empty content is no rows.
    """
    if not content:
        return []
    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    return lines


def serialize_lines(lines: list[str]) -> str:
    """Join rows into file content, each row terminated by a newline."""
    return ''.join(f"{line}\n" for line in lines)


def load_lines(filename: str) -> list[str]:
    """Read a file and return its rows.

    A missing file is not an error; it yields no rows.

    Raises:
        PersistenceError: if the file exists but cannot be read
    """
    try:
        with open(filename, 'r', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
            content = f.read()
    except FileNotFoundError:
        logger.info(f"{filename} does not exist, starting with an empty buffer")
        return []
    except OSError as e:
        raise PersistenceError(filename, e.strerror or str(e), e) from e
    lines = parse_lines(content)
    logger.info(f"Loaded {len(lines)} lines from {filename}")
    return lines


def save_lines(filename: str, lines: list[str]) -> None:
    """Write rows to filename atomically.

    The content goes to a temporary file in the same directory which then
    replaces the target, so a failed save leaves the old file intact.

    Raises:
        PersistenceError: if the file cannot be written
    """
    dir_name = os.path.dirname(filename) or '.'
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                         newline='', dir=dir_name,
                                         suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(serialize_lines(lines))
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.replace(temp_filename, filename)
    except (OSError, UnicodeEncodeError) as e:
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_filename}: {cleanup_error}")
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        logger.error(f"Saving {filename} failed: {reason}")
        raise PersistenceError(filename, reason, e) from e
    logger.info(f"Saved {len(lines)} lines to {filename}")
