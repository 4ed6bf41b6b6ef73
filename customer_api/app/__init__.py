"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, security), ``models`` (the
in‑memory entity), ``schemas`` (request and response bodies),
``services`` (store and service facade) and ``api`` (versioned
routers).
"""

from .main import app  # noqa: F401
