"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved: SQL for real accounts,
the client-held session blob for demo accounts, and the on-disk git
repositories the tool reviews. Services depend on them instead of touching
SQLAlchemy sessions or request.session directly.
"""
