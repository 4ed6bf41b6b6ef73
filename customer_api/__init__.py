"""
Top‑level package for the Customer API.

This file makes ``customer_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``customer_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
