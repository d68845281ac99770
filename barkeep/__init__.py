"""Barkeep accounts and saved searches."""
