"""Database utilities."""

from __future__ import annotations

from warehouse_control.db.engine import (
    SessionFactory,
    create_engine,
    create_session_factory,
    init_db,
    session_scope,
)

__all__ = ["SessionFactory", "create_engine", "create_session_factory", "init_db", "session_scope"]
