# mypy: ignore-errors
"""
Migration Alembic créant les tables solar_systems, planets et weather_conditions.

La contrainte `uq_weather_condition_system_day` garantit au plus une condition par
(système solaire, jour).
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Crée les tables du domaine météo planétaire."""
    op.create_table(
        "solar_systems",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("reference_planet_id", sa.Integer(), nullable=True),
    )
    op.create_table(
        "planets",
        sa.Column("pk", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "solar_system_id", sa.Integer(), sa.ForeignKey("solar_systems.id"), nullable=False
        ),
        sa.Column("planet_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("radius", sa.Float(), nullable=False),
        sa.Column("angular_speed", sa.Float(), nullable=False),
        sa.Column("initial_phase", sa.Float(), nullable=False),
    )
    op.create_table(
        "weather_conditions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "solar_system_id", sa.Integer(), sa.ForeignKey("solar_systems.id"), nullable=False
        ),
        sa.Column("day", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(length=16), nullable=False),
        sa.Column("triangle_area", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("solar_system_id", "day", name="uq_weather_condition_system_day"),
    )


def downgrade() -> None:
    """Supprime les tables créées par `upgrade`."""
    op.drop_table("weather_conditions")
    op.drop_table("planets")
    op.drop_table("solar_systems")
