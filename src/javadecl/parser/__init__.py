"""Parser Module — Reads Java source and extracts declaration descriptors.

Each compilation unit yields, per top-level type:
    - The type itself ("Class")
    - Its methods, with parameter-type signatures
    - Its field statements, one line per statement
    - Its constructors
    - Its directly nested classes and interfaces ("Inner Class")

Usage:
    from javadecl.parser import JavaParser

    parser = JavaParser()
    record = parser.parse_file(Path("MyClass.java"))
"""

from javadecl.parser.base import (
    CodeParser,
    Declaration,
    DeclarationKind,
    FileRecord,
    Visibility,
)
from javadecl.parser.java_parser import JavaParser

__all__ = [
    "CodeParser",
    "Declaration",
    "DeclarationKind",
    "FileRecord",
    "JavaParser",
    "Visibility",
]
