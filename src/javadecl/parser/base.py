"""Base parser interface and data models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union


class Visibility(str, Enum):
    """Coarse visibility bucket derived from explicit modifiers only."""

    PUBLIC = "public"
    PRIVATE = "private"
    OTHER = "other"  # protected, package-private, implicit


class DeclarationKind(str, Enum):
    """Kind label printed in the second descriptor column."""

    CLASS = "Class"
    METHOD = "Method"
    VARIABLE = "Variable"
    CONSTRUCTOR = "Constructor"
    INNER_CLASS = "Inner Class"


# Minimum widths of the visibility and kind columns
VISIBILITY_WIDTH = 10
KIND_WIDTH = 20


@dataclass(frozen=True)
class Declaration:
    """One descriptor line: a declaration with its visibility and kind."""

    visibility: Visibility
    kind: DeclarationKind
    signature: str

    def render(self) -> str:
        """Format as ``visibility kind signature`` with padded columns."""
        return (
            f"{self.visibility.value:<{VISIBILITY_WIDTH}} "
            f"{self.kind.value:<{KIND_WIDTH}} "
            f"{self.signature}"
        )


@dataclass
class FileRecord:
    """Descriptor lines extracted from a single source file."""

    file_path: str
    details: list[str] = field(default_factory=list)

    def add(self, declaration: Declaration) -> str:
        """Render *declaration*, append it and return the rendered line."""
        line = declaration.render()
        self.details.append(line)
        return line

    def to_dict(self) -> dict:
        """Convert to the dictionary written to the output record."""
        return {
            "filePath": self.file_path,
            "details": list(self.details),
        }


class CodeParser(ABC):
    """Abstract base class for language-specific parsers."""

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language this parser handles (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]:
        """Return file extensions this parser handles (e.g., ['.java'])."""
        pass

    @abstractmethod
    def parse_file(self, file_path: Union[str, Path]) -> FileRecord:
        """
        Parse a source file and extract its declarations.

        Args:
            file_path: Path to the source file

        Returns:
            FileRecord holding one rendered line per declaration

        Raises:
            FileAccessError: If the file cannot be read
            JavaParseError: If the source contains syntax errors
        """
        pass

    def can_parse(self, file_path: Path) -> bool:
        """Check if this parser can handle the given file."""
        return file_path.suffix.lower() in self.file_extensions
