"""Structure document loading service."""

from __future__ import annotations

import json
import string
from collections.abc import Mapping
from pathlib import Path

from .schema_models import SchemaDocument

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_$")


class SchemaError(Exception):
    """Raised when the structure document cannot be read or parsed."""


def load_structure_document(structure_path: Path | str) -> SchemaDocument:
    """Read a ``structure.js`` file and parse its root object literal."""
    path = Path(structure_path)
    if not path.exists():
        raise SchemaError(f"Structure file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Failed to read structure file {path}: {exc}") from exc

    extracted = extract_root_object(text)
    if extracted is None:
        raise SchemaError(f"Cannot find root JSON in {path}")
    return SchemaDocument(source_path=path, root=parse_lenient_json(extracted))


def extract_root_object(text: str) -> str | None:
    """Return the first balanced ``{...}`` literal, honouring double-quoted strings."""
    start = text.find("{")
    if start < 0:
        return None
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def parse_lenient_json(text: str) -> Mapping:
    """Parse JSON allowing comments, unquoted keys and single-quoted strings."""
    normalized = normalize_lenient_json(strip_comments(text))
    try:
        parsed = json.loads(normalized)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"JSON parse error: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise SchemaError("Structure root must be an object.")
    return parsed


def normalize_lenient_json(text: str) -> str:
    """Rewrite single-quoted strings and bare object keys into strict JSON."""
    result: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char in ('"', "'"):
            end = _string_end(text, index)
            literal = text[index:end]
            result.append(literal if char == '"' else _double_quoted(literal[1:-1]))
            index = end
            continue
        if char in _IDENTIFIER_CHARS:
            end = index
            while end < length and text[end] in _IDENTIFIER_CHARS:
                end += 1
            token = text[index:end]
            result.append(f'"{token}"' if _next_significant_char(text, end) == ":" else token)
            index = end
            continue
        result.append(char)
        index += 1
    return "".join(result)


def _string_end(text: str, start: int) -> int:
    quote = text[start]
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return index + 1
        index += 1
    return len(text)


def _double_quoted(body: str) -> str:
    parts = ['"']
    index = 0
    while index < len(body):
        char = body[index]
        if char == "\\" and index + 1 < len(body):
            escaped = body[index + 1]
            parts.append("'" if escaped == "'" else char + escaped)
            index += 2
            continue
        parts.append('\\"' if char == '"' else char)
        index += 1
    parts.append('"')
    return "".join(parts)


def _next_significant_char(text: str, start: int) -> str:
    index = start
    while index < len(text) and text[index].isspace():
        index += 1
    return text[index] if index < len(text) else ""


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that appear outside string literals."""
    result: list[str] = []
    quote: str | None = None
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if quote is not None:
            result.append(char)
            if char == "\\" and index + 1 < length:
                result.append(text[index + 1])
                index += 2
                continue
            if char == quote:
                quote = None
            index += 1
            continue
        if char in ('"', "'"):
            quote = char
            result.append(char)
            index += 1
            continue
        if text.startswith("//", index):
            newline = text.find("\n", index)
            index = length if newline < 0 else newline
            continue
        if text.startswith("/*", index):
            closing = text.find("*/", index + 2)
            index = length if closing < 0 else closing + 2
            continue
        result.append(char)
        index += 1
    return "".join(result)
