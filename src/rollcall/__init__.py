"""Rollcall - attendance and leave tracker backend.

The ``rollcall`` package holds the application shell (HTTP API, CLI) and the
shared domain primitives. Identity, authentication and authorization live in
``rollcall_identity`` and ``rollcall_auth``.
"""

__version__ = "1.0.0"
