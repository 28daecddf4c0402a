"""Pull-based token cursor over a JSON document.

The document is parsed up front and then replayed as a flat, forward-only
stream of lexical events. Scalars are surfaced as their raw text: numbers
keep their literal spelling, booleans become "true" / "false" and null
becomes a scalar whose value is None.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.exceptions import MalformedDocumentError


class TokenKind(str, Enum):
    """Lexical event types."""

    OBJECT_START = "object_start"
    OBJECT_END = "object_end"
    ARRAY_START = "array_start"
    ARRAY_END = "array_end"
    FIELD_NAME = "field_name"
    SCALAR = "scalar"


@dataclass(frozen=True)
class Token:
    """A single lexical event."""

    kind: TokenKind
    value: str | None = None

    @property
    def is_null(self) -> bool:
        return self.kind == TokenKind.SCALAR and self.value is None


class _JsonObject(list):
    """Object members as ordered (key, value) pairs, duplicates kept."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard constant {name}")


def _scalar_text(value: Any) -> str | None:
    if value is None:
        return None
    if value is True:
        return "true"
    if value is False:
        return "false"
    return value  # str, or the literal text of a number


_NO_NODE = object()


def _walk(root: Any) -> Iterator[Token]:
    """Replay a parsed document depth-first, using an explicit stack."""
    stack: list[tuple[TokenKind, Iterator[Any]]] = []
    node = root
    while True:
        if isinstance(node, _JsonObject):
            yield Token(TokenKind.OBJECT_START)
            stack.append((TokenKind.OBJECT_END, iter(node)))
        elif isinstance(node, list):
            yield Token(TokenKind.ARRAY_START)
            stack.append((TokenKind.ARRAY_END, iter(node)))
        elif node is not _NO_NODE:
            yield Token(TokenKind.SCALAR, _scalar_text(node))

        if not stack:
            return
        end_kind, members = stack[-1]
        member = next(members, _NO_NODE)
        if member is _NO_NODE:
            stack.pop()
            yield Token(end_kind)
            node = _NO_NODE
        elif end_kind == TokenKind.OBJECT_END:
            key, node = member
            yield Token(TokenKind.FIELD_NAME, key)
        else:
            node = member


class TokenCursor:
    """Forward-only, single-pass cursor. Not restartable."""

    def __init__(self, root: Any):
        self._tokens = _walk(root)
        self._exhausted = False

    def advance(self) -> Token | None:
        """Return the next token, or None at end of stream."""
        if self._exhausted:
            return None
        token = next(self._tokens, None)
        if token is None:
            self._exhausted = True
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.advance()
            if token is None:
                return
            yield token


def open_document(text: str | bytes) -> TokenCursor:
    """
    Open a cursor over a JSON document.

    Args:
        text: Response body as text or UTF-8 bytes

    Returns:
        TokenCursor positioned before the first token

    Raises:
        MalformedDocumentError: If the text is not well-formed JSON
    """
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        root = json.loads(
            text,
            object_pairs_hook=_JsonObject,
            parse_float=str,
            parse_int=str,
            parse_constant=_reject_constant,
        )
    except ValueError as e:
        raise MalformedDocumentError(str(e), snippet=str(text)[:80])
    except RecursionError:
        raise MalformedDocumentError("nesting too deep", snippet=str(text)[:80])
    return TokenCursor(root)
