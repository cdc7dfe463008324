"""Records returned by the field decoder."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List


@dataclass(frozen=True)
class FieldMetadata:
    """One content region (source or final) of a decoded field."""

    content: str
    # Hash stored in the field when Autoanki wrote it
    stored_hash: str
    # Hash of ``content`` as found now
    computed_hash: str
    field_changed: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "field_changed", self.computed_hash != self.stored_hash
        )


@dataclass(frozen=True)
class DecodedField:
    """An Anki note field decoded back into its Autoanki parts."""

    raw: str
    source_content: FieldMetadata
    final_content: FieldMetadata
    style_media_files: List[str]
    script_media_files: List[str]
    uuid: str
    model_name: str
    tags: str  # space separated

    @property
    def changed(self) -> bool:
        """``True`` if either content region was edited outside Autoanki."""
        return self.source_content.field_changed or self.final_content.field_changed

    def to_dict(self) -> dict:
        return asdict(self)
