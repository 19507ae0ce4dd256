"""
Definition of custom errors
"""


class Bin2cError(Exception):
    """Basic exception for errors raised by bin2c."""
    def __init__(self, msg=None):
        if msg is None:
            msg = "bin2c failed"
        super().__init__(msg)


class UsageError(Bin2cError):
    """Invalid, conflicting or missing command line arguments."""


class ReadError(Bin2cError):
    """Exception for input file read failure."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid input file : '{path}': {reason}")
        self.path = path
        self.reason = reason


class WriteError(Bin2cError):
    """Exception for output file write failure."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to open file for writing '{path}': {reason}")
        self.path = path
        self.reason = reason
