"""Command line interface for Autoanki note fields."""
