"""create rank tracking tables

Revision ID: 4e2b9c7a1d03
Revises:
Create Date: 2026-10-18 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "4e2b9c7a1d03"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sites",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("url", sa.String(length=1000), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "keywords",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("site_id", sa.Integer(), nullable=False),
        sa.Column("keyword", sa.String(length=300), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["site_id"], ["sites.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_keywords_site_id"), "keywords", ["site_id"], unique=False)
    op.create_index(op.f("ix_keywords_keyword"), "keywords", ["keyword"], unique=False)

    op.create_table(
        "rankings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("keyword_id", sa.Integer(), nullable=False),
        sa.Column("rank_position", sa.Integer(), nullable=True),
        sa.Column("search_type", sa.String(length=32), nullable=False),
        sa.Column("result_url", sa.String(length=2000), nullable=True),
        sa.Column("result_title", sa.String(length=500), nullable=True),
        sa.Column("checked_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["keyword_id"], ["keywords.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_rankings_keyword_id"), "rankings", ["keyword_id"], unique=False)
    op.create_index(op.f("ix_rankings_checked_at"), "rankings", ["checked_at"], unique=False)

    op.create_table(
        "tracked_urls",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("keyword", sa.String(length=300), nullable=False),
        sa.Column("target_url", sa.String(length=2000), nullable=False),
        sa.Column("section", sa.String(length=100), nullable=True),
        sa.Column("memo", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tracked_urls_keyword"), "tracked_urls", ["keyword"], unique=False)

    op.create_table(
        "url_rankings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tracked_url_id", sa.Integer(), nullable=False),
        sa.Column("rank_position", sa.Integer(), nullable=True),
        sa.Column("section_name", sa.String(length=100), nullable=True),
        sa.Column("section_rank", sa.Integer(), nullable=True),
        sa.Column("is_exposed", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("section_exists", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("checked_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["tracked_url_id"], ["tracked_urls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_url_rankings_tracked_url_id"), "url_rankings", ["tracked_url_id"], unique=False)
    op.create_index(op.f("ix_url_rankings_checked_at"), "url_rankings", ["checked_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_url_rankings_checked_at"), table_name="url_rankings")
    op.drop_index(op.f("ix_url_rankings_tracked_url_id"), table_name="url_rankings")
    op.drop_table("url_rankings")
    op.drop_index(op.f("ix_tracked_urls_keyword"), table_name="tracked_urls")
    op.drop_table("tracked_urls")
    op.drop_index(op.f("ix_rankings_checked_at"), table_name="rankings")
    op.drop_index(op.f("ix_rankings_keyword_id"), table_name="rankings")
    op.drop_table("rankings")
    op.drop_index(op.f("ix_keywords_keyword"), table_name="keywords")
    op.drop_index(op.f("ix_keywords_site_id"), table_name="keywords")
    op.drop_table("keywords")
    op.drop_table("sites")
