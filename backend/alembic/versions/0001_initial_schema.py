"""initial schema: medications, dose_events, display_preferences

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

FREQUENCIES = ("Daily", "SpecificWeekdays", "EveryNDays", "Weekly", "AsNeeded")


def upgrade() -> None:
    op.create_table(
        "medications",
        sa.Column("medication_id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("dosage", sa.String(), nullable=False),
        sa.Column("scheduled_times", sa.String(), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column(
            "frequency",
            sa.Enum(*FREQUENCIES, name="frequency", native_enum=False),
            nullable=False,
        ),
        sa.Column("specific_weekdays", sa.String(), nullable=False),
    )
    op.create_index("ix_medications_name", "medications", ["name"])

    op.create_table(
        "dose_events",
        sa.Column("dose_event_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "medication_id",
            sa.Uuid(),
            sa.ForeignKey("medications.medication_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("scheduled_time", sa.String(length=5), nullable=False),
        sa.Column("taken", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("medication_id", "date", "scheduled_time", name="uq_dose_events_medication_date_time"),
    )
    op.create_index("ix_dose_events_medication_id", "dose_events", ["medication_id"])
    op.create_index("ix_dose_events_date", "dose_events", ["date"])

    op.create_table(
        "display_preferences",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("font_scale", sa.Float(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("display_preferences")
    op.drop_index("ix_dose_events_date", table_name="dose_events")
    op.drop_index("ix_dose_events_medication_id", table_name="dose_events")
    op.drop_table("dose_events")
    op.drop_index("ix_medications_name", table_name="medications")
    op.drop_table("medications")
