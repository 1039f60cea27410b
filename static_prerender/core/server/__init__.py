"""Ephemeral static file server."""
