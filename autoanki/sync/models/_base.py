from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

_EXTRA_ALIASES = {
    "allow": "allow",
    "forbid": "forbid",
    "ignore": "ignore",
    "strict": "forbid",
    "lenient": "allow",
    "1": "forbid",
    "true": "forbid",
    "on": "forbid",
    "0": "allow",
    "false": "allow",
    "off": "allow",
}


def _env_extra_mode(default: str = "ignore") -> str:
    """
    How unknown keys in a parsed note field are treated.

    Applies to the metadata region, its media markers and the field root
    (e.g. extra attributes Anki or a user put on ``<autoanki-metadata>``, or
    stray markup between regions). The source region is always strict and the
    final region always permissive, whatever this says.

    Read from AUTOANKI_FIELD_EXTRA, then AUTOANKI_EXTRA: a pydantic extra mode
    (allow|forbid|ignore) or strict/lenient and the usual boolean spellings.
    Unrecognised values fall back to ``default``.
    """
    raw = os.getenv("AUTOANKI_FIELD_EXTRA") or os.getenv("AUTOANKI_EXTRA") or ""
    return _EXTRA_ALIASES.get(raw.strip().lower(), default)


_EXTRA = _env_extra_mode()


class FieldModel(BaseModel):
    """
    Base model for the parsed field tree.

    Unknown keys are ignored by default (Anki and users may add attributes or
    markup around ours). Set an env var before import to tighten or relax this:
      export AUTOANKI_FIELD_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        extra=_EXTRA,
        populate_by_name=True,
    )


__all__ = ["FieldModel", "_env_extra_mode"]
