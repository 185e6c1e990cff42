"""FastAPI application for the rollcall identity service."""

from rollcall.presentation.api.app import create_app

__all__ = ["create_app"]
