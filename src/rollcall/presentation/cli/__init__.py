"""Command line interface for rollcall."""
