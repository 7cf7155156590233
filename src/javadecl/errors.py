"""Exception hierarchy for javadecl runs.

Every error aborts the run. The CLI reports the message and exits non-zero.
"""

from pathlib import Path
from typing import Optional


class JavaDeclError(Exception):
    """Base class for all javadecl errors."""


class ConfigurationError(JavaDeclError):
    """Configuration file is missing, malformed, or lacks the path list."""


class FileAccessError(JavaDeclError):
    """A configured source file is missing or unreadable."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class JavaParseError(JavaDeclError):
    """Source file contains syntax errors."""

    def __init__(self, path: Optional[Path], line: int, column: int, detail: str = "syntax error"):
        self.path = path
        self.line = line
        self.column = column
        where = f"{path}:{line}:{column}" if path is not None else f"line {line}, column {column}"
        super().__init__(f"Failed to parse {where}: {detail}")


class SerializationError(JavaDeclError):
    """Output record could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")
