"""Public exports for note field data models."""

from __future__ import annotations

from .dto import DecodedField, FieldMetadata
from .schema import NoteFieldTree

__all__ = [
    "DecodedField",
    "FieldMetadata",
    "NoteFieldTree",
]
