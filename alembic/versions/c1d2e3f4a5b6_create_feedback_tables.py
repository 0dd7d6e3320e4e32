"""create users, events, templates, forms and response tables

Revision ID: c1d2e3f4a5b6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "c1d2e3f4a5b6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    user_role = postgresql.ENUM("coach", "player", name="user_role", create_type=False)
    event_type = postgresql.ENUM("match", "training", name="event_type", create_type=False)
    form_status = postgresql.ENUM("draft", "active", "closed", name="form_status", create_type=False)
    for enum in (user_role, event_type, form_status):
        enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("club", sa.String(length=255), nullable=False),
        sa.Column("position", sa.String(length=100), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("jersey_number", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_club_role", "users", ["club", "role"], unique=False)

    op.create_table(
        "events",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", event_type, nullable=False),
        sa.Column("opponent", sa.String(length=255), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("club", sa.String(length=255), nullable=False),
        sa.Column("location", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_events_club_date", "events", ["club", "date"], unique=False)

    op.create_table(
        "templates",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("estimated_time", sa.String(length=50), nullable=True),
        sa.Column("icon", sa.String(length=16), nullable=True),
        sa.Column("structure", postgresql.JSONB(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_templates_type", "templates", ["type"], unique=False)

    op.create_table(
        "template_sections",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("template_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["template_id"], ["templates.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_template_sections_template_order",
        "template_sections",
        ["template_id", "order_index"],
        unique=False,
    )

    op.create_table(
        "template_questions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("section_id", sa.UUID(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_type", sa.String(length=20), nullable=False),
        sa.Column("options", postgresql.JSONB(), nullable=True),
        sa.Column("scale", sa.Integer(), nullable=True),
        sa.Column("required", sa.Boolean(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["section_id"], ["template_sections.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_template_questions_section_order",
        "template_questions",
        ["section_id", "order_index"],
        unique=False,
    )

    op.create_table(
        "forms",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("template_id", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("structure", postgresql.JSONB(), nullable=False),
        sa.Column("status", form_status, server_default="draft", nullable=False),
        sa.Column("allow_anonymous", sa.Boolean(), server_default="true", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["template_id"], ["templates.id"]),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_forms_event_id", "forms", ["event_id"], unique=False)
    op.create_index("ix_forms_status", "forms", ["status"], unique=False)
    op.create_index("ix_forms_event_status", "forms", ["event_id", "status"], unique=False)

    op.create_table(
        "responses",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("form_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False),
        sa.Column("completion_time_seconds", sa.Integer(), nullable=True),
        sa.Column("submitted_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["form_id"], ["forms.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_responses_form_id", "responses", ["form_id"], unique=False)
    op.create_index("ix_responses_user_id", "responses", ["user_id"], unique=False)
    op.create_index("ix_responses_form_user", "responses", ["form_id", "user_id"], unique=False)

    op.create_table(
        "question_responses",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("response_id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.String(length=100), nullable=False),
        sa.Column("answer_text", sa.Text(), nullable=True),
        sa.Column("answer_numeric", sa.Float(), nullable=True),
        sa.Column("answer_choice", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["response_id"], ["responses.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_question_responses_response_id", "question_responses", ["response_id"], unique=False
    )
    op.create_index(
        "ix_question_responses_question_id", "question_responses", ["question_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_question_responses_question_id", table_name="question_responses")
    op.drop_index("ix_question_responses_response_id", table_name="question_responses")
    op.drop_table("question_responses")

    op.drop_index("ix_responses_form_user", table_name="responses")
    op.drop_index("ix_responses_user_id", table_name="responses")
    op.drop_index("ix_responses_form_id", table_name="responses")
    op.drop_table("responses")

    op.drop_index("ix_forms_event_status", table_name="forms")
    op.drop_index("ix_forms_status", table_name="forms")
    op.drop_index("ix_forms_event_id", table_name="forms")
    op.drop_table("forms")

    op.drop_index("ix_template_questions_section_order", table_name="template_questions")
    op.drop_table("template_questions")
    op.drop_index("ix_template_sections_template_order", table_name="template_sections")
    op.drop_table("template_sections")

    op.drop_index("ix_templates_type", table_name="templates")
    op.drop_table("templates")
    op.drop_index("ix_events_club_date", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_users_club_role", table_name="users")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS form_status")
    op.execute("DROP TYPE IF EXISTS event_type")
    op.execute("DROP TYPE IF EXISTS user_role")
