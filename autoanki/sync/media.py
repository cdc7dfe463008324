"""
Media markers for the metadata region of a note field.

Anki only keeps (and syncs) media files that are referenced from some note
field. The markers emitted here are inert ``<object declare>`` references that
make Anki's media resolver see the note's style, script and plugin-specific
files. They render nothing.

Style files additionally get a ``<style>`` block that ``@import``s the same
file, so the stylesheet applies as soon as the field renders. ``<style>`` is
global wherever it sits in the document, and removing the field's markup from
view (e.g. when the next card renders) removes the imported stylesheet with it,
so styles of different notes never pile up.
"""

from __future__ import annotations

from typing import List
from urllib.parse import quote

from tinyhtml import h, raw

from .common import MEDIA_MARKER_TAG, SCRIPT_MEDIA_TYPE, STYLE_MEDIA_TYPE
from .domain import MediaKind, MediaRef, Note

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"

_MEDIA_TYPES = {
    MediaKind.STYLE: STYLE_MEDIA_TYPE,
    MediaKind.SCRIPT: SCRIPT_MEDIA_TYPE,
}


def marker_attrs(ref: MediaRef, kind: MediaKind) -> dict:
    attrs: dict = {"data": ref.stored_filename}
    media_type = _MEDIA_TYPES.get(kind)
    if media_type:
        attrs["type"] = media_type
    attrs["declare"] = True
    return attrs


def render_marker(ref: MediaRef, kind: MediaKind) -> str:
    return h(MEDIA_MARKER_TAG, **marker_attrs(ref, kind))().render()


def render_style_import(ref: MediaRef) -> str:
    url = quote(ref.stored_filename, safe=_URI_COMPONENT_SAFE)
    return h("style")(raw(f'\n@import "{url}";\n')).render()


def media_markers(note: Note) -> str:
    """Return the media markers of ``note``: styles, then scripts, then other media."""
    out: List[str] = []
    for kind, refs in note.media_by_kind():
        for ref in refs:
            out.append(render_marker(ref, kind))
            if kind is MediaKind.STYLE:
                out.append(render_style_import(ref))
    return "\n".join(out)


def media_type_kind(media_type: object) -> MediaKind:
    """Map a marker's ``type`` attribute back to the media kind."""
    if media_type == STYLE_MEDIA_TYPE:
        return MediaKind.STYLE
    if media_type == SCRIPT_MEDIA_TYPE:
        return MediaKind.SCRIPT
    return MediaKind.GENERIC
