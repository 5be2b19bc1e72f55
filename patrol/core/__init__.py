"""
Core utilities shared across the Patrol API.

This package hosts configuration helpers (env vars, storage paths) and the
JSON response class used by every router. Services and repositories depend on
these primitives instead of reading os.environ directly.
"""
