"""
Small tree parser for the pseudo-HTML stored in Anki note fields.

Turns markup into plain dicts/lists:

  - an element is ``{"@_attributes": {...}, "#text": "...", <child tag>: ...}``
  - a child tag seen once is a dict, seen several times a list of dicts
    (``list_paths`` force a list even for a single child)
  - bare boolean attributes (``<x hidden>``) have the value ``True``

``opaque_paths`` name elements whose content is captured verbatim as
``#text`` instead of being parsed. Note content stored inside a field is
arbitrary user HTML and must not be interpreted as part of the field layout.

Paths are dotted tag paths from the root (``"autoanki-metadata.object"``); a
leading ``"*."`` matches the rest of the path at any depth.

Unlike a browser, the parser insists on well-formed markup: every element must
be closed by its own end tag or be self-closing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Any, Dict, Iterable, List, Optional, Tuple

LOGGER = logging.getLogger(__name__)

ATTRIBUTES_KEY = "@_attributes"
TEXT_KEY = "#text"

# Left unconsumed by HTMLParser.feed() only when a tag is cut off at end of input
_TAG_START = re.compile(r"<(?:[a-zA-Z/!?]|\Z)")

# Elements Anki's editor may write without an end tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


class MarkupParseError(ValueError):
    """Raised for markup that is not well-formed."""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        if position is not None:
            message = f"{message} (line {position[0]}, column {position[1] + 1})"
        super().__init__(message)
        self.position = position


def path_matches(path: str, pattern: str) -> bool:
    if pattern.startswith("*."):
        suffix = pattern[2:]
        return path == suffix or path.endswith("." + suffix)
    return path == pattern


def _matches_any(path: str, patterns: Iterable[str]) -> bool:
    return any(path_matches(path, p) for p in patterns)


def _void_hint(tag: str) -> str:
    if tag in VOID_ELEMENTS:
        return (
            f"; <{tag}> is an HTML void element, the field was likely"
            " reformatted by the Anki editor"
        )
    return ""


@dataclass
class _Frame:
    tag: str
    path: str
    attrs: Dict[str, Any]
    opaque: bool
    position: Tuple[int, int]
    text: List[str] = field(default_factory=list)
    children: Dict[str, Any] = field(default_factory=dict)


def _add_child(children: Dict[str, Any], tag: str, node: dict, force_list: bool):
    existing = children.get(tag)
    if existing is None:
        children[tag] = [node] if force_list else node
    elif isinstance(existing, list):
        existing.append(node)
    else:
        children[tag] = [existing, node]


class _TreeBuilder(HTMLParser):
    def __init__(self, opaque_paths: Tuple[str, ...], list_paths: Tuple[str, ...]):
        super().__init__(convert_charrefs=True)
        self._opaque_paths = opaque_paths
        self._list_paths = list_paths
        self._stack: List[_Frame] = []
        self._root: Dict[str, Any] = {}
        self._root_text: List[str] = []

    # ----------------------------- handlers ---------------------------------

    def handle_starttag(self, tag, attrs):
        frame = self._open(tag, attrs)
        if frame.opaque:
            # Same raw-text mode HTMLParser uses for <script>/<style>: nothing
            # up to the matching end tag is interpreted.
            self.set_cdata_mode(tag)

    def handle_startendtag(self, tag, attrs):
        self._open(tag, attrs)
        self._close(tag)

    def handle_endtag(self, tag):
        self._close(tag)

    def handle_data(self, data):
        if self._stack:
            self._stack[-1].text.append(data)
        else:
            self._root_text.append(data)

    # ------------------------------ helpers ---------------------------------

    def _open(self, tag: str, attrs) -> _Frame:
        parent_path = self._stack[-1].path if self._stack else ""
        path = f"{parent_path}.{tag}" if parent_path else tag
        frame = _Frame(
            tag=tag,
            path=path,
            attrs={name: True if value is None else value for name, value in attrs},
            opaque=_matches_any(path, self._opaque_paths),
            position=self.getpos(),
        )
        self._stack.append(frame)
        return frame

    def _close(self, tag: str) -> None:
        if not self._stack:
            raise MarkupParseError(
                f"unexpected closing tag </{tag}>{_void_hint(tag)}", self.getpos()
            )
        frame = self._stack[-1]
        if frame.tag != tag:
            raise MarkupParseError(
                f"closing tag </{tag}> does not match opening tag <{frame.tag}>"
                f" at line {frame.position[0]}{_void_hint(frame.tag)}",
                self.getpos(),
            )
        self._stack.pop()

        text = "".join(frame.text)
        node: Dict[str, Any] = {
            ATTRIBUTES_KEY: frame.attrs,
            TEXT_KEY: text if frame.opaque else text.strip(),
        }
        node.update(frame.children)
        siblings = self._stack[-1].children if self._stack else self._root
        _add_child(
            siblings, tag, node, _matches_any(frame.path, self._list_paths)
        )

    def close(self):
        # close() would flush a cut-off tag as plain text
        if not self.cdata_elem and _TAG_START.match(self.rawdata):
            raise MarkupParseError("unterminated tag", self.getpos())
        super().close()

    def result(self) -> Dict[str, Any]:
        if self._stack:
            frame = self._stack[-1]
            raise MarkupParseError(
                f"unclosed tag <{frame.tag}>{_void_hint(frame.tag)}", frame.position
            )
        root = dict(self._root)
        text = "".join(self._root_text).strip()
        if text:
            root[TEXT_KEY] = text
        return root


class MarkupParser:
    """Parse field markup into a tagged tree; see the module docstring."""

    def __init__(
        self,
        *,
        opaque_paths: Iterable[str] = (),
        list_paths: Iterable[str] = (),
    ):
        self.opaque_paths = tuple(opaque_paths)
        self.list_paths = tuple(list_paths)

    def parse(self, text: str) -> Dict[str, Any]:
        builder = _TreeBuilder(self.opaque_paths, self.list_paths)
        builder.feed(text)
        builder.close()
        tree = builder.result()
        LOGGER.debug("field.markup.parsed len=%d top=%s", len(text), list(tree))
        return tree
