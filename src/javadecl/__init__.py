"""javadecl — declaration listings for Java source files.

Reads a JSON list of Java files, parses each one with tree-sitter, and
records a visibility/kind/signature line for every type, method, field,
constructor and inner class it declares.
"""

from javadecl.config import RunConfig, load_config
from javadecl.errors import (
    ConfigurationError,
    FileAccessError,
    JavaDeclError,
    JavaParseError,
    SerializationError,
)
from javadecl.parser import Declaration, DeclarationKind, FileRecord, JavaParser, Visibility
from javadecl.runner import RunResult, collect, run, write_records

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Declaration",
    "DeclarationKind",
    "FileAccessError",
    "FileRecord",
    "JavaDeclError",
    "JavaParseError",
    "JavaParser",
    "RunConfig",
    "RunResult",
    "SerializationError",
    "Visibility",
    "collect",
    "load_config",
    "run",
    "write_records",
]
