"""
High-level use cases for the Barkeep backend.

Each service module orchestrates repositories/adapters to implement business
rules (choose the saved-search backend, bootstrap demo sessions, resolve the
current account). Routers call these services instead of manipulating the
database or request.session directly.
"""
