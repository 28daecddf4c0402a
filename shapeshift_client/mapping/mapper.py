"""Field-driven record mapper and list boundary splitter.

Both walk a TokenCursor once, front to back, and hand the raw text of each
recognised field to its setter. Unknown fields and structural tokens are
skipped, so field order and extra fields in a response never matter.

The splitter has no explicit "element complete" event to work with. It
treats every ObjectStart at element level as the start of a new element
and keeps the previous one only if its presence marker is non-empty. An
element whose marker is absent, or present but empty, is dropped. Objects
nested inside an element neither split it nor set its fields.
"""

import logging
from typing import Any

from .fields import RecordSchema
from .tokens import Token, TokenCursor, TokenKind, open_document

logger = logging.getLogger(__name__)

ERROR_FIELD = "error"

# Children of the top-level array (or of the top-level object, for getcoins)
ELEMENT_DEPTH = 2


def _apply_field(
    name: str,
    cursor: TokenCursor,
    schema: RecordSchema,
    values: dict[str, Any],
) -> Token | None:
    """
    Handle a FieldName token.

    Returns:
        A structural token that followed the field name and still needs
        dispatching, or None if nothing is pending.
    """
    spec = schema.lookup(name)
    if spec is None and name != ERROR_FIELD:
        return None

    value_token = cursor.advance()
    if value_token is None:
        return None
    if value_token.kind != TokenKind.SCALAR:
        return value_token
    if value_token.value is None:
        return None

    if spec is not None:
        spec.setter(values, value_token.value)
    else:
        values[ERROR_FIELD] = value_token.value
    return None


def map_record(cursor: TokenCursor, schema: RecordSchema) -> Any:
    """
    Map a single-object document onto a record, consuming to end of stream.

    Args:
        cursor: Token cursor over the response
        schema: Target record type and field table

    Returns:
        Immutable record; its error attribute carries any domain error

    Raises:
        NumericDecodeError: If a numeric field cannot be parsed
    """
    values: dict[str, Any] = {}

    token = cursor.advance()
    while token is not None:
        pending = None
        if token.kind == TokenKind.FIELD_NAME:
            pending = _apply_field(token.value or "", cursor, schema, values)
        token = pending if pending is not None else cursor.advance()

    record = schema.build(values)
    if values.get(ERROR_FIELD) is not None:
        logger.warning(
            f"{schema.record_type.__name__}: exchange reported error: {values[ERROR_FIELD]}"
        )
    return record


def map_list(cursor: TokenCursor, schema: RecordSchema) -> list[Any]:
    """
    Split a streamed array (or object of objects) into records.

    Args:
        cursor: Token cursor over the response
        schema: Target record type, field table and presence marker

    Returns:
        Records in document order
    """
    records: list[Any] = []
    values: dict[str, Any] = {}
    dropped_error: str | None = None
    depth = 0

    token = cursor.advance()
    while token is not None:
        pending = None
        if token.kind in (TokenKind.OBJECT_START, TokenKind.ARRAY_START):
            depth += 1
            if token.kind == TokenKind.OBJECT_START and depth == ELEMENT_DEPTH:
                if schema.is_present(values):
                    records.append(schema.build(values))
                elif values.get(ERROR_FIELD) is not None:
                    dropped_error = values[ERROR_FIELD]
                values = {}
        elif token.kind in (TokenKind.OBJECT_END, TokenKind.ARRAY_END):
            depth -= 1
        elif token.kind == TokenKind.FIELD_NAME and depth <= ELEMENT_DEPTH:
            # Fields of objects nested inside an element belong to no record
            pending = _apply_field(token.value or "", cursor, schema, values)
        token = pending if pending is not None else cursor.advance()

    # The last element has no following ObjectStart
    if schema.is_present(values):
        records.append(schema.build(values))
    elif values.get(ERROR_FIELD) is not None:
        dropped_error = values[ERROR_FIELD]

    if dropped_error is not None:
        logger.warning(
            f"{schema.record_type.__name__} list: exchange reported error: {dropped_error}"
        )
    logger.debug(f"Mapped {len(records)} {schema.record_type.__name__} records")
    return records


def map_response(text: str | bytes, schema: RecordSchema) -> Any:
    """Open a response body and map it as a single record."""
    return map_record(open_document(text), schema)


def map_list_response(text: str | bytes, schema: RecordSchema) -> list[Any]:
    """Open a response body and split it into records."""
    return map_list(open_document(text), schema)
