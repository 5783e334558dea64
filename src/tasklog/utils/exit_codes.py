"""
Exit codes for tasklog.

Each error class in tasklog.errors maps onto one of these so scripts wrapping
the CLI can tell a bad flag from a missing task.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Storage failure (database unreadable, constraint violation, etc.)
ERROR_STORAGE = 3

# Terminal could not be driven (not a TTY, raw mode refused, draw failed)
ERROR_TERMINAL = 4

# Resource not found
ERROR_NOT_FOUND = 5

# Operation already applied (e.g. task already done)
ERROR_CONFLICT = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_STORAGE: "ERROR_STORAGE",
        ERROR_TERMINAL: "ERROR_TERMINAL",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_CONFLICT: "ERROR_CONFLICT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_STORAGE: "Database error - try 'tasklog init'",
        ERROR_TERMINAL: "Terminal error - run from an interactive terminal",
        ERROR_NOT_FOUND: "Resource not found",
        ERROR_CONFLICT: "Nothing to do - already applied",
    }
    return descriptions.get(code, "Unknown error")
