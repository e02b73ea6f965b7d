"""Constants and configuration defaults for the linepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""
    
    # Buffer capacity
    MAX_ROWS = 1000  # Maximum number of rows in the buffer
    MAX_WIDTH = 200  # Maximum row width; typing stops one short of this
    
    # Command line
    FILENAME_MAX_LEN = 30  # Longest file name accepted on the command line
    
    # Persistence
    FILE_ENCODING = "latin-1"  # One byte maps to one character/column
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
    
    # Configuration
    CONFIG_APP_NAME = "linepad"
    CONFIG_FILE_NAME = "config.json"
    CONFIG_ENV_VAR = "LINEPAD_CONFIG"
    
    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    
    # Status messages
    STATUS_HELP = "Ctrl+S = Save | Ctrl+Q = Quit | {}"
    SAVED_MESSAGE = "Saved {} lines to {}"
    QUIT_CONFIRM_MESSAGE = "Unsaved changes. Quit without saving? (y/n)"
    DIRTY_MARKER = " *"
