"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` holds configuration, logging, errors and the
in‑memory post store, ``schemas`` holds the Pydantic payload models
and ``api`` holds the routers that dispatch requests to the store.
"""

from .main import app  # noqa: F401
