"""Names shared by the field encoder and decoder.

These are part of the stored format: changing any of them makes previously
synced Anki notes undecodable.
"""

from __future__ import annotations


class AutoankiTags:
    SOURCE_CONTENT = "autoanki-source-content"
    METADATA = "autoanki-metadata"
    FINAL_CONTENT = "autoanki-final-content"


class MetadataAttr:
    UUID = "data-autoanki-uuid"
    NOTE_TYPE = "data-autoanki-note-type"
    TAGS = "data-autoanki-tags"
    SOURCE_CONTENT_HASH = "data-autoanki-source-content-hash"
    FINAL_CONTENT_HASH = "data-autoanki-final-content-hash"


# Tag name of the media markers inside the metadata region
MEDIA_MARKER_TAG = "object"

STYLE_MEDIA_TYPE = "text/css"
SCRIPT_MEDIA_TYPE = "application/javascript"

# Written exactly once before and once after every region payload; the
# decoder strips exactly len(CONTENT_PADDING) characters from each end.
CONTENT_PADDING = "\n"

__all__ = [
    "AutoankiTags",
    "MetadataAttr",
    "MEDIA_MARKER_TAG",
    "STYLE_MEDIA_TYPE",
    "SCRIPT_MEDIA_TYPE",
    "CONTENT_PADDING",
]
