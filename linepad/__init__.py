"""Linepad - A minimal full-screen editor for a single file."""

import logging

from .model import RowStore, Cursor, CursorPosition
from .edit_ops import EditOps
from .session import EditorSession, Mode, RenderState
from .errors import LinepadError, PersistenceError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'RowStore',
    'Cursor',
    'CursorPosition',
    'EditOps',
    'EditorSession',
    'Mode',
    'RenderState',
    'LinepadError',
    'PersistenceError',
]
