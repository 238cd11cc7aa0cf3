"""Trigger DDL that appends ``items_history`` rows whenever an item is updated.

The acting user is read from the transaction-local ``app.current_user_id``
setting, which the store sets with ``set_config(..., true)`` right before the
update so it never leaks into other transactions.
"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

ACTOR_SETTING = "app.current_user_id"

CREATE_AUDIT_FUNCTION = f"""
CREATE OR REPLACE FUNCTION log_item_changes()
RETURNS TRIGGER AS $$
DECLARE
    actor_id INTEGER := NULLIF(current_setting('{ACTOR_SETTING}', true), '')::INTEGER;
BEGIN
    IF actor_id IS NULL THEN
        RAISE EXCEPTION '{ACTOR_SETTING} must be set before updating items';
    END IF;

    IF NEW.name IS DISTINCT FROM OLD.name THEN
        INSERT INTO items_history (item_id, changed_column, changed_from, changed_by_id, change_time)
        VALUES (OLD.id, 'name', OLD.name, actor_id, NOW());
    END IF;

    IF NEW.count IS DISTINCT FROM OLD.count THEN
        INSERT INTO items_history (item_id, changed_column, changed_from, changed_by_id, change_time)
        VALUES (OLD.id, 'count', OLD.count::TEXT, actor_id, NOW());
    END IF;

    RETURN NEW;
END;
$$ LANGUAGE plpgsql;
"""

DROP_AUDIT_TRIGGER = "DROP TRIGGER IF EXISTS trigger_log_item_changes ON items;"

CREATE_AUDIT_TRIGGER = """
CREATE TRIGGER trigger_log_item_changes
    AFTER UPDATE ON items
    FOR EACH ROW
    EXECUTE FUNCTION log_item_changes();
"""

DROP_AUDIT_FUNCTION = "DROP FUNCTION IF EXISTS log_item_changes();"

INSTALL_STATEMENTS: Sequence[str] = (CREATE_AUDIT_FUNCTION, DROP_AUDIT_TRIGGER, CREATE_AUDIT_TRIGGER)
UNINSTALL_STATEMENTS: Sequence[str] = (DROP_AUDIT_TRIGGER, DROP_AUDIT_FUNCTION)


async def install_audit_trigger(connection: AsyncConnection) -> None:
    for statement in INSTALL_STATEMENTS:
        await connection.execute(text(statement))


__all__ = [
    "ACTOR_SETTING",
    "INSTALL_STATEMENTS",
    "UNINSTALL_STATEMENTS",
    "install_audit_trigger",
]
