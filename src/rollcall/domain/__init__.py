"""Shared domain layer."""
