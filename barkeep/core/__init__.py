"""
Core utilities shared across the Barkeep backend.

This package hosts:
- configuration helpers (env vars, paths, feature flags)
- cross-cutting concerns such as logging setup and key/hash helpers

Services and routers should depend on these primitives instead of reading
os.environ or configuring logging themselves.
"""
