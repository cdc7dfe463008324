"""Autoanki exceptions."""

from __future__ import annotations

from typing import Any, Optional


class AutoankiError(Exception):
    """Base Autoanki error."""


class AutoankiNoteFromAnkiError(AutoankiError):
    """An Anki note field could not be turned back into an Autoanki field."""

    def __init__(self, message: str, *, field_name: str, raw: str):
        super().__init__(message)
        self.field_name = field_name
        self.raw = raw


class FieldParseError(AutoankiNoteFromAnkiError):
    """The field content is not well-formed markup."""

    def __init__(self, message: str, *, field_name: str, raw: str, reason: str):
        super().__init__(message, field_name=field_name, raw=raw)
        self.reason = reason


class FieldShapeError(AutoankiNoteFromAnkiError):
    """The field content parsed, but not into the expected Autoanki layout."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str,
        raw: str,
        reason: str,
        tree: Optional[Any] = None,
    ):
        super().__init__(message, field_name=field_name, raw=raw)
        self.reason = reason
        self.tree = tree
