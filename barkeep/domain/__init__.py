"""Pure domain rules (no storage, no HTTP)."""
