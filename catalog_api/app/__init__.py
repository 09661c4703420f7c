"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, products) exposes a router defined in
``api/v1/endpoints``, a set of response schemas in ``schemas`` and a
service class in ``services`` holding the business rules.  Shared
infrastructure (settings, logging, error handling and the in‑memory
record store) lives in ``core``.
"""

from .main import app  # noqa: F401
