"""Java declaration extractor using tree-sitter."""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Union

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser, Tree

from javadecl.errors import FileAccessError, JavaParseError

from .base import CodeParser, Declaration, DeclarationKind, FileRecord, Visibility

logger = logging.getLogger(__name__)

JAVA_LANGUAGE = Language(tsjava.language())

# Node types reported as top-level types of a compilation unit.
_TOP_LEVEL_TYPES = {
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
    "annotation_type_declaration",
}

# Nested members reported as inner classes (classes and interfaces only).
_INNER_TYPES = {"class_declaration", "interface_declaration"}

# Interface and annotation constants are field statements too.
_FIELD_TYPES = {"field_declaration", "constant_declaration"}

_UNNAMED = "Unnamed"

_TYPE_ANNOTATION = re.compile(r"@[\w.]+(\s*\([^()]*\))?\s*")


class JavaParser(CodeParser):
    """Parse Java source files and extract declaration descriptors."""

    def __init__(self):
        self._parser = Parser(JAVA_LANGUAGE)

    @property
    def language(self) -> str:
        return "java"

    @property
    def file_extensions(self) -> list[str]:
        return [".java"]

    def parse_file(self, file_path: Union[str, Path]) -> FileRecord:
        """Parse a Java file and extract its declaration descriptors.

        The record keeps *file_path* exactly as given.
        """
        try:
            source_code = Path(file_path).read_bytes()
        except OSError as e:
            raise FileAccessError(file_path, e.strerror or str(e)) from e

        tree = self.parse_source(source_code, file_path)
        record = FileRecord(file_path=str(file_path))
        for declaration in self.extract(tree):
            record.add(declaration)
        return record

    def parse_source(self, source_code: bytes, file_path: Optional[Path] = None) -> Tree:
        """
        Parse raw Java source into a syntax tree.

        Args:
            source_code: UTF-8 encoded Java source
            file_path: Origin of the source, used in error messages

        Returns:
            The parsed tree

        Raises:
            JavaParseError: If the tree contains error or missing nodes
        """
        tree = self._parser.parse(source_code)
        if tree.root_node.has_error:
            bad = _first_error(tree.root_node)
            if bad is None:
                bad = tree.root_node
            detail = f"missing {bad.type}" if bad.is_missing else "syntax error"
            raise JavaParseError(file_path, bad.start_point[0] + 1, bad.start_point[1] + 1, detail)
        logger.debug("Parsed %d bytes from %s", len(source_code), file_path or "<source>")
        return tree

    def extract(self, tree: Tree) -> list[Declaration]:
        """
        Walk the top-level types of a compilation unit.

        Each type contributes its own line, then its methods, fields,
        constructors and inner classes, each group in declaration order.
        Inner classes are listed but never descended into.
        """
        declarations: list[Declaration] = []
        for node in tree.root_node.children:
            if node.type in _TOP_LEVEL_TYPES:
                declarations.extend(self._extract_type(node))
        return declarations

    def _extract_type(self, node: Node) -> list[Declaration]:
        members = list(_body_members(node))

        declarations = [
            Declaration(_visibility(node), DeclarationKind.CLASS, _name(node)),
        ]
        declarations += [
            Declaration(_visibility(m), DeclarationKind.METHOD, _signature(m))
            for m in members
            if m.type == "method_declaration"
        ]
        declarations += [
            Declaration(_visibility(m), DeclarationKind.VARIABLE, _field_names(m))
            for m in members
            if m.type in _FIELD_TYPES
        ]
        declarations += [
            Declaration(_visibility(m), DeclarationKind.CONSTRUCTOR, _signature(m))
            for m in members
            if m.type == "constructor_declaration"
        ]
        declarations += [
            Declaration(_visibility(m), DeclarationKind.INNER_CLASS, _name(m))
            for m in members
            if m.type in _INNER_TYPES
        ]
        return declarations


# ── Tree helpers ───────────────────────────────────────────────


def _text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace")


def _name(node: Node) -> str:
    name_node = node.child_by_field_name("name")
    return _text(name_node) if name_node is not None else _UNNAMED


def _first_error(node: Node) -> Optional[Node]:
    """Return the first ERROR or MISSING node in document order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _body_members(type_node: Node) -> Iterator[Node]:
    """Yield the direct member declarations of a type, in source order."""
    body = type_node.child_by_field_name("body")
    if body is None:
        return
    for child in body.children:
        if child.type == "enum_body_declarations":
            # enum members follow the constant list
            yield from (c for c in child.children if c.is_named)
        elif child.is_named:
            yield child


def _visibility(node: Node) -> Visibility:
    """
    Classify a declaration by its explicit modifiers.

    Only ``public`` and ``private`` are recognised; everything else,
    including implicitly public interface members, is "other".
    """
    modifiers = None
    for child in node.children:
        if child.type == "modifiers":
            modifiers = child
            break

    if modifiers is None:
        return Visibility.OTHER

    keywords = {child.type for child in modifiers.children}
    if "public" in keywords:
        return Visibility.PUBLIC
    if "private" in keywords:
        return Visibility.PRIVATE
    return Visibility.OTHER


def _field_names(node: Node) -> str:
    """Comma-join the variable names declared by one field statement."""
    names = [
        _text(declarator.child_by_field_name("name"))
        for declarator in node.children_by_field_name("declarator")
        if declarator.child_by_field_name("name") is not None
    ]
    return ", ".join(names) if names else _UNNAMED


def _signature(node: Node) -> str:
    """Build ``name(Type1, Type2)`` for a method or constructor."""
    params_node = node.child_by_field_name("parameters")
    param_types = _parameter_types(params_node) if params_node is not None else []
    return f"{_name(node)}({', '.join(param_types)})"


def _parameter_types(params_node: Node) -> list[str]:
    """Extract normalised parameter types from a formal_parameters node."""
    param_types = []
    for child in params_node.children:
        if child.type == "formal_parameter":
            type_node = child.child_by_field_name("type")
            if type_node is None:
                continue
            dims = child.child_by_field_name("dimensions")
            suffix = "[]" * _text(dims).count("[") if dims is not None else ""
            param_types.append(_normalise_type(_text(type_node)) + suffix)
        elif child.type == "spread_parameter":
            # varargs read as an array type
            type_node = next(
                (c for c in child.named_children if c.type not in ("modifiers", "variable_declarator")),
                None,
            )
            if type_node is not None:
                param_types.append(_normalise_type(_text(type_node)) + "[]")
    return param_types


def _normalise_type(type_text: str) -> str:
    """
    Drop generic arguments and type annotations, tidy whitespace.

    e.g. ``Map<String, List<Integer>>`` -> ``Map``,
    ``@NonNull String [ ]`` -> ``String[]``
    """
    text = _TYPE_ANNOTATION.sub("", type_text)
    stripped = []
    depth = 0
    for ch in text:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        elif depth == 0:
            stripped.append(ch)
    text = "".join(stripped)
    text = re.sub(r"\s*(\[|\]|\.)\s*", r"\1", text)
    return " ".join(text.split())
