"""Create items, users and items_history with the item audit trigger."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.sql import text

from warehouse_control.db.audit import INSTALL_STATEMENTS, UNINSTALL_STATEMENTS
from warehouse_control.models import ROLE_VALUES

revision = "0001_create_inventory_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("name <> ''", name="ck_items_name_not_empty"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("name <> ''", name="ck_users_name_not_empty"),
        sa.CheckConstraint(
            "role IN ({})".format(", ".join(f"'{value}'" for value in ROLE_VALUES)),
            name="ck_users_role",
        ),
    )

    op.create_table(
        "items_history",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "item_id",
            sa.Integer(),
            sa.ForeignKey("items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("changed_column", sa.String(), nullable=False),
        sa.Column("changed_from", sa.String(), nullable=True),
        sa.Column("changed_by_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("change_time", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_items_history_item_id", "items_history", ["item_id"])
    op.create_index("ix_items_history_changed_by_id", "items_history", ["changed_by_id"])

    for statement in INSTALL_STATEMENTS:
        op.execute(text(statement))


def downgrade() -> None:
    for statement in UNINSTALL_STATEMENTS:
        op.execute(text(statement))

    op.drop_index("ix_items_history_changed_by_id", table_name="items_history")
    op.drop_index("ix_items_history_item_id", table_name="items_history")
    op.drop_table("items_history")
    op.drop_table("users")
    op.drop_table("items")
