"""
Pydantic schema definitions for API payloads.

Each domain (users, products) defines the Pydantic models used to
describe its responses.  Request bodies are validated by the service
layer rather than by these models so that type and range violations
are reported with HTTP 400 and a domain‑specific message.
"""
