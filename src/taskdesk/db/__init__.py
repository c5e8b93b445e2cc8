"""Database related helpers."""

from __future__ import annotations

from .session import get_session, init_db, store_scope

__all__ = ["get_session", "init_db", "store_scope"]
