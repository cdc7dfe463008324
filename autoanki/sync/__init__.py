"""Public API for Autoanki <-> Anki note field conversion."""

from .decoding import decode_note_field, has_field_content_changed
from .domain import MediaKind, MediaRef, Note
from .encoding import encode_note_field
from .hashing import hash_content
from .media import media_markers
from .models import DecodedField, FieldMetadata

__all__ = [
    "encode_note_field",
    "decode_note_field",
    "has_field_content_changed",
    "hash_content",
    "media_markers",
    "Note",
    "MediaRef",
    "MediaKind",
    "DecodedField",
    "FieldMetadata",
]
