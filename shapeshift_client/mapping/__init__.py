"""Streaming JSON → typed record mapping."""

from .fields import FieldSpec, RecordSchema, as_bool, as_float, as_text, field
from .mapper import map_list, map_list_response, map_record, map_response
from .tokens import Token, TokenCursor, TokenKind, open_document

__all__ = [
    "FieldSpec",
    "RecordSchema",
    "as_bool",
    "as_float",
    "as_text",
    "field",
    "map_list",
    "map_list_response",
    "map_record",
    "map_response",
    "Token",
    "TokenCursor",
    "TokenKind",
    "open_document",
]
