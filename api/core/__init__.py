"""
Core utilities shared across the cars API.

This package hosts:
- configuration helpers (env vars, database URL, bind address)
- cross-cutting pieces such as logging setup and response classes

Routers and services depend on these primitives instead of reading the
environment or configuring handlers themselves.
"""
