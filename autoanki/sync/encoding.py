"""
Autoanki note -> Anki note field.

Given an Autoanki note and the source and final content of one of its fields,
build the text stored in the Anki note field:

  - only the final content is visible in Anki;
  - the source content is kept (escaped, hidden) so it can be edited from
    Anki and read back;
  - metadata (identity, tags, content hashes, media markers) lets the decoder
    detect edits made directly inside Anki.
"""

from __future__ import annotations

import asyncio
import html
import logging

from .common import CONTENT_PADDING, AutoankiTags, MetadataAttr
from .domain import Note
from .hashing import hash_content
from .media import media_markers

LOGGER = logging.getLogger(__name__)


def _pad(payload: str) -> str:
    return f"{CONTENT_PADDING}{payload}{CONTENT_PADDING}"


def _attr_lines(attrs: dict) -> str:
    return "".join(f'\n {k}="{html.escape(v)}"' for k, v in attrs.items())


def source_region(source_content: str) -> str:
    tag = AutoankiTags.SOURCE_CONTENT
    # Escaping is mandatory: raw note source would break the region's own markup.
    return f"<{tag} hidden>{_pad(html.escape(source_content))}</{tag}>"


def metadata_region(
    note: Note, source_content_hash: str, final_content_hash: str
) -> str:
    tag = AutoankiTags.METADATA
    attrs = {
        MetadataAttr.UUID: note.uuid,
        MetadataAttr.NOTE_TYPE: note.model_name,
        MetadataAttr.TAGS: note.tags,
        MetadataAttr.SOURCE_CONTENT_HASH: source_content_hash,
        MetadataAttr.FINAL_CONTENT_HASH: final_content_hash,
    }
    return f"<{tag}{_attr_lines(attrs)}\n hidden>{_pad(media_markers(note))}</{tag}>"


def final_region(final_content: str) -> str:
    tag = AutoankiTags.FINAL_CONTENT
    # contenteditable="false" keeps Anki's editor from touching the rendered
    # content; the source region is what users are meant to edit.
    return f'<{tag} contenteditable="false">{_pad(final_content)}</{tag}>'


async def encode_note_field(note: Note, final_content: str, source_content: str) -> str:
    """Return the Anki note field text for one field of ``note``."""
    assert note.uuid is not None, "Autoanki note without uuid"

    source_hash, final_hash = await asyncio.gather(
        hash_content(source_content), hash_content(final_content)
    )
    LOGGER.debug(
        "field.encoder.note uuid=%s source_len=%d final_len=%d",
        note.uuid,
        len(source_content),
        len(final_content),
    )
    return "\n\n".join(
        [
            source_region(source_content),
            metadata_region(note, source_hash, final_hash),
            final_region(final_content),
        ]
    )
