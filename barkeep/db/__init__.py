"""SQL storage for accounts and saved searches."""

from .session import Base, get_engine, get_session

__all__ = ["Base", "get_engine", "get_session"]
