"""Autoanki: keep richer notes inside plain Anki note fields."""
