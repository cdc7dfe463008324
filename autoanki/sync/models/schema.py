"""
Expected shape of a parsed Autoanki note field.

Validated against the tree produced by ``markup.MarkupParser``; keys are the
tree's tag, ``@_attributes`` and ``#text`` names, exposed through aliases.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import ConfigDict, Field

from ..common import AutoankiTags, MetadataAttr
from ..markup import ATTRIBUTES_KEY, TEXT_KEY
from ._base import FieldModel


class SourceContentNode(FieldModel):
    # No children or other keys; any attribute is fine.
    model_config = ConfigDict(extra="forbid")

    attributes: Dict[str, Any] = Field(alias=ATTRIBUTES_KEY)
    text: str = Field(alias=TEXT_KEY)


class FinalContentNode(FieldModel):
    # Anki or the user may leave other things around the final content.
    model_config = ConfigDict(extra="allow")

    attributes: Dict[str, Any] = Field(alias=ATTRIBUTES_KEY)
    text: str = Field(alias=TEXT_KEY)


class MarkerAttributes(FieldModel):
    data: str
    type: Optional[str] = None
    declare: Union[bool, str, None] = None


class MediaMarkerNode(FieldModel):
    attributes: MarkerAttributes = Field(alias=ATTRIBUTES_KEY)
    text: str = Field("", alias=TEXT_KEY)


class StyleNode(FieldModel):
    attributes: Dict[str, Any] = Field(default_factory=dict, alias=ATTRIBUTES_KEY)
    text: str = Field("", alias=TEXT_KEY)


class MetadataAttributes(FieldModel):
    uuid: str = Field(alias=MetadataAttr.UUID)
    note_type: str = Field(alias=MetadataAttr.NOTE_TYPE)
    tags: str = Field(alias=MetadataAttr.TAGS)
    source_content_hash: str = Field(alias=MetadataAttr.SOURCE_CONTENT_HASH)
    final_content_hash: str = Field(alias=MetadataAttr.FINAL_CONTENT_HASH)
    hidden: Union[bool, str, None] = None


class MetadataNode(FieldModel):
    attributes: MetadataAttributes = Field(alias=ATTRIBUTES_KEY)
    markers: List[MediaMarkerNode] = Field(default_factory=list, alias="object")
    style: Union[StyleNode, List[StyleNode], None] = None
    text: str = Field("", alias=TEXT_KEY)


class NoteFieldTree(FieldModel):
    source_content: SourceContentNode = Field(alias=AutoankiTags.SOURCE_CONTENT)
    metadata: MetadataNode = Field(alias=AutoankiTags.METADATA)
    final_content: FinalContentNode = Field(alias=AutoankiTags.FINAL_CONTENT)
    text: str = Field("", alias=TEXT_KEY)
