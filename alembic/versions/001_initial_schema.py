"""Initial schema: events and reservations with the restricting foreign key.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Events table
    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(100), nullable=False),
        sa.Column("fecha", sa.DateTime(timezone=False), nullable=False),
        sa.Column("ubicacion", sa.String(250), nullable=False),
    )
    op.create_index("ix_events_id", "events", ["id"])
    op.create_index("ix_events_fecha", "events", ["fecha"])

    # Reservations table
    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "evento_id",
            sa.Integer(),
            sa.ForeignKey("events.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("nombre_usuario", sa.String(100), nullable=False),
        sa.Column("cantidad_boletos", sa.Integer(), nullable=False),
        sa.Column("fecha_reserva", sa.DateTime(timezone=False), nullable=False),
        sa.CheckConstraint("cantidad_boletos > 0", name="check_cantidad_boletos_positive"),
    )
    op.create_index("ix_reservations_id", "reservations", ["id"])
    # DELETE on events checks this column for referencing rows
    op.create_index("ix_reservations_evento_id", "reservations", ["evento_id"])


def downgrade() -> None:
    op.drop_table("reservations")
    op.drop_table("events")
