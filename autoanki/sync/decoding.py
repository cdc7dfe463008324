"""
Anki note field -> Autoanki note field.

Reverses ``encoding.encode_note_field``: parses the field, checks it still has
the layout Autoanki wrote, recovers the source and final content and compares
their hashes with the ones stored at encode time.
"""

from __future__ import annotations

import asyncio
import html
import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from autoanki.exceptions import FieldParseError, FieldShapeError

from .common import CONTENT_PADDING, MEDIA_MARKER_TAG, AutoankiTags
from .domain import MediaKind
from .hashing import hash_content
from .markup import MarkupParseError, MarkupParser
from .media import media_type_kind
from .models import DecodedField, FieldMetadata, NoteFieldTree

LOGGER = logging.getLogger(__name__)

_MARKERS_PATH = f"{AutoankiTags.METADATA}.{MEDIA_MARKER_TAG}"

PARSER = MarkupParser(
    opaque_paths=(
        f"*.{AutoankiTags.SOURCE_CONTENT}",
        f"*.{AutoankiTags.FINAL_CONTENT}",
        f"*.{_MARKERS_PATH}",
    ),
    list_paths=(_MARKERS_PATH,),
)


def strip_padding(text: str) -> str:
    """Undo the padding the encoder puts around every region payload."""
    n = len(CONTENT_PADDING)
    return text[n:-n]


def parse_field_tree(field_name: str, field_text: str) -> Dict[str, Any]:
    try:
        return PARSER.parse(field_text)
    except MarkupParseError as e:
        LOGGER.debug("field.decoder.parse_fail field=%s reason=%s", field_name, e)
        raise FieldParseError(
            f"""Field "{field_name}"'s content

"{field_text}"

is invalid HTML

Reason: {e}""",
            field_name=field_name,
            raw=field_text,
            reason=str(e),
        ) from e


def validate_field_tree(
    field_name: str, field_text: str, tree: Dict[str, Any]
) -> NoteFieldTree:
    try:
        return NoteFieldTree.model_validate(tree)
    except ValidationError as e:
        LOGGER.debug(
            "field.decoder.shape_fail field=%s errors=%d", field_name, e.error_count()
        )
        raise FieldShapeError(
            f"""Field {field_name}'s content

"{field_text}"

parsed as

```
{json.dumps(tree, indent=1)}
```

doesn't meet Autoanki's expectation.
It's likely corrupted.

Reason: {e}""",
            field_name=field_name,
            raw=field_text,
            reason=str(e),
            tree=tree,
        ) from e


async def decode_note_field(field_name: str, field_text: str) -> DecodedField:
    """Parse an Anki note field's content back into an Autoanki note field.

    Raises ``FieldParseError`` for content that is not well-formed markup and
    ``FieldShapeError`` for markup without the expected Autoanki layout.
    """
    tree = parse_field_tree(field_name, field_text)
    field = validate_field_tree(field_name, field_text, tree)
    attrs = field.metadata.attributes

    source_content = strip_padding(html.unescape(field.source_content.text))
    final_content = strip_padding(field.final_content.text)
    source_hash, final_hash = await asyncio.gather(
        hash_content(source_content), hash_content(final_content)
    )

    style_media_files: List[str] = []
    script_media_files: List[str] = []
    for marker in field.metadata.markers:
        kind = media_type_kind(marker.attributes.type)
        if kind is MediaKind.STYLE:
            style_media_files.append(marker.attributes.data)
        elif kind is MediaKind.SCRIPT:
            script_media_files.append(marker.attributes.data)

    decoded = DecodedField(
        raw=field_text,
        source_content=FieldMetadata(
            content=source_content,
            stored_hash=attrs.source_content_hash,
            computed_hash=source_hash,
        ),
        final_content=FieldMetadata(
            content=final_content,
            stored_hash=attrs.final_content_hash,
            computed_hash=final_hash,
        ),
        style_media_files=style_media_files,
        script_media_files=script_media_files,
        uuid=attrs.uuid,
        model_name=attrs.note_type,
        tags=attrs.tags,
    )
    LOGGER.debug(
        "field.decoder.decoded field=%s uuid=%s source_changed=%s final_changed=%s",
        field_name,
        decoded.uuid,
        decoded.source_content.field_changed,
        decoded.final_content.field_changed,
    )
    return decoded


async def has_field_content_changed(content: str, field: FieldMetadata) -> bool:
    """Compare ``content`` against the hash stored for ``field`` only."""
    return (await hash_content(content)) != field.stored_hash
