"""
Core utilities shared across the school board API.

This package hosts configuration (env vars, paths), logging setup and the
error taxonomy. Routers and services depend on these primitives instead of
reading os.environ or building error responses themselves.
"""
