# autoanki/sync/domain.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class MediaKind(str, Enum):
    STYLE = "style"
    SCRIPT = "script"
    GENERIC = "generic"


@dataclass(frozen=True)
class MediaRef:
    stored_filename: str


@dataclass(frozen=True)
class Note:
    """The parts of an Autoanki note the field codec reads."""

    uuid: Optional[str]
    model_name: str
    tags: str = ""  # space separated
    style_files: Tuple[MediaRef, ...] = ()
    script_files: Tuple[MediaRef, ...] = ()
    media_files: Tuple[MediaRef, ...] = ()

    def media_by_kind(self) -> Tuple[Tuple[MediaKind, Tuple[MediaRef, ...]], ...]:
        return (
            (MediaKind.STYLE, tuple(self.style_files)),
            (MediaKind.SCRIPT, tuple(self.script_files)),
            (MediaKind.GENERIC, tuple(self.media_files)),
        )
