"""
Version 1 of the API.

This subpackage bundles all endpoints of the catalog service.  The
top‑level ``router`` is mounted by ``create_app`` under the configured
``API_PREFIX``.
"""
