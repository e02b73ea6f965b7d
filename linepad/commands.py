"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .session import EditorSession
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            session: Session the command acts on
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the buffer."""
        self._move(session)
        return False

    @abstractmethod
    def _move(self, session: 'EditorSession'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_left()


class RightCharCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_right()


class UpLineCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_up()


class DownLineCommand(MovementCommand):
    def _move(self, session):
        session.cursor.move_down()


class EditCommand(EditorCommand):
    """Base class for editing commands.

    The result of ``_edit`` is passed through so rejected edits (capacity
    limits, backspace at the start of the buffer) leave the session clean.
    """

    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        return self._edit(session, key_event)

    @abstractmethod
    def _edit(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        """Perform the edit and report whether the buffer changed."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, session, key_event):
        return session.edit_ops.backspace()


class InsertNewlineCommand(EditCommand):
    def _edit(self, session, key_event):
        return session.edit_ops.newline()


class InsertTextCommand(EditCommand):
    def _edit(self, session, key_event):
        return session.edit_ops.type_char(key_event.value)


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        """System commands don't modify buffer content."""
        self._execute_system(session)
        return False

    @abstractmethod
    def _execute_system(self, session: 'EditorSession'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    def _execute_system(self, session):
        session.request_quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, session):
        session.save()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, session: 'EditorSession', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the buffer was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(session, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.REGULAR:
            return self._insert_text.execute(session, key_event)

        return False
