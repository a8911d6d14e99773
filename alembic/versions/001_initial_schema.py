"""Initial schema: companies and jobs tables

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
    op.create_table(
        "companies",
        sa.Column("handle", sa.String(25), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False, unique=True),
        sa.Column("num_employees", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )
    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=True),
        sa.Column("equity", sa.Text(), nullable=True),
        sa.Column(
            "company_handle",
            sa.String(25),
            sa.ForeignKey("companies.handle", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        sa.CheckConstraint(
            "CAST(equity AS NUMERIC) >= 0 AND CAST(equity AS NUMERIC) <= 1",
            name="ck_jobs_equity",
        ),
    )


def downgrade() -> None:
    op.drop_table("jobs")
    op.drop_table("companies")
