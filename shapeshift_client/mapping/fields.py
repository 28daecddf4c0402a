"""Field tables: which wire field sets which record attribute, and how.

A setter receives the in-progress attribute values of a record and the raw
scalar text of one field occurrence. Most setters assign a single decoded
attribute; a few (e.g. cancelpending's "success") set several.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ..core.exceptions import NumericDecodeError

Setter = Callable[[dict[str, Any], str], None]
Decoder = Callable[[str], Any]

_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def as_text(raw: str) -> str:
    return raw


def as_float(raw: str) -> float:
    """Parse a JSON number literal as a 64-bit float; ValueError on anything else.

    NaN, infinities, underscores and surrounding whitespace are rejected.
    """
    if not _NUMBER.fullmatch(raw):
        raise ValueError(f"not a number literal: {raw!r}")
    return float(raw)


def as_bool(raw: str) -> bool:
    """Only the literal "true" is true."""
    return raw == "true"


@dataclass(frozen=True)
class FieldSpec:
    """One entry of a field table."""

    name: str
    setter: Setter


def field(name: str, attribute: str, decode: Decoder = as_text) -> FieldSpec:
    """
    Build a FieldSpec that decodes one wire field into one attribute.

    Args:
        name: Field name as it appears in the JSON document
        attribute: Record attribute to populate
        decode: Raw text -> attribute value

    Returns:
        FieldSpec whose setter raises NumericDecodeError if decoding fails
    """

    def setter(values: dict[str, Any], raw: str) -> None:
        try:
            values[attribute] = decode(raw)
        except ValueError:
            raise NumericDecodeError(name, raw)

    return FieldSpec(name, setter)


class RecordSchema:
    """A record type bound to its field table and presence marker."""

    def __init__(
        self,
        record_type: type[BaseModel],
        fields: Iterable[FieldSpec],
        presence_marker: str | None = None,
    ):
        """
        Args:
            record_type: Pydantic model built from the collected values
            fields: Field table; the first entry wins for a repeated name
            presence_marker: Attribute that marks a list element as complete
        """
        self.record_type = record_type
        self.fields = tuple(fields)
        self.presence_marker = presence_marker
        self._table: dict[str, FieldSpec] = {}
        for spec in self.fields:
            self._table.setdefault(spec.name, spec)

    def __repr__(self) -> str:
        return f"RecordSchema({self.record_type.__name__}, {len(self._table)} fields)"

    def lookup(self, name: str) -> FieldSpec | None:
        return self._table.get(name)

    def is_present(self, values: dict[str, Any]) -> bool:
        """Check whether the presence marker holds a non-empty value."""
        if self.presence_marker is None:
            return bool(values)
        return bool(values.get(self.presence_marker))

    def build(self, values: dict[str, Any]) -> Any:
        """Construct the immutable record from collected values."""
        return self.record_type(**values)
