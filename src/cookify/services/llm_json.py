"""Recover JSON embedded in free-text language model output.

Chat models are asked to answer with JSON but often wrap it in prose or
Markdown code fences. ``extract_json`` finds the first balanced array or
object in the text and parses it, returning a result object rather than
raising so callers can choose between fallback and propagation.
"""

import json
from dataclasses import dataclass
from enum import Enum


class ParseError(ValueError):
    """Raised when model output does not contain the expected JSON."""


class JsonKind(Enum):
    ARRAY = ("[", "]")
    OBJECT = ("{", "}")

    @property
    def opener(self) -> str:
        return self.value[0]

    @property
    def closer(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class JsonExtraction:
    """Outcome of an extraction attempt."""

    value: object = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> object:
        """Return the parsed value or raise ``ParseError``."""
        if self.error is not None:
            raise ParseError(self.error)
        return self.value


def find_balanced(text: str, kind: JsonKind) -> str | None:
    """Return the first balanced region opened by ``kind``, if any."""
    start = text.find(kind.opener)
    if start == -1:
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
            continue
        if char == '"':
            in_string = True
        elif char == kind.opener:
            depth += 1
        elif char == kind.closer:
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def extract_json(text: str | None, kind: JsonKind) -> JsonExtraction:
    """Extract and parse the first JSON array or object found in ``text``."""
    if not text:
        return JsonExtraction(error="empty model response")
    fragment = find_balanced(text, kind)
    if fragment is None:
        return JsonExtraction(error=f"no JSON {kind.name.lower()} in model response")
    try:
        return JsonExtraction(value=json.loads(fragment))
    except json.JSONDecodeError as exc:
        return JsonExtraction(error=f"invalid JSON in model response: {exc}")
