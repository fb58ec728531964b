"""Initial ledger schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17
"""

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

ACCOUNT_CLASSES = ("asset", "liability", "equity", "revenue", "expense")


def upgrade() -> None:
    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column(
            "last_entry_sequence",
            sa.Integer(),
            nullable=False,
            server_default="0",
        ),
    )

    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "account_class",
            sa.Enum(
                *ACCOUNT_CLASSES,
                name="account_class_enum",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column(
            "parent_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=True
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("opening_balance", sa.Numeric(19, 4), nullable=False),
        sa.Column("balance", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint(
            "organization_id", "code", name="uq_accounts_organization_code"
        ),
    )
    op.create_index(
        "ix_accounts_organization_id", "accounts", ["organization_id"]
    )

    op.create_table(
        "journal_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column("entry_number", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("reference", sa.String(255), nullable=True),
        sa.Column("total_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint(
            "organization_id",
            "entry_number",
            name="uq_journal_entries_organization_number",
        ),
    )
    op.create_index(
        "ix_journal_entries_organization_id",
        "journal_entries",
        ["organization_id"],
    )

    op.create_table(
        "journal_entry_details",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "entry_id",
            sa.Integer(),
            sa.ForeignKey("journal_entries.id"),
            nullable=False,
        ),
        sa.Column(
            "account_id",
            sa.Integer(),
            sa.ForeignKey("accounts.id"),
            nullable=False,
        ),
        sa.Column("debit", sa.Numeric(19, 4), nullable=False),
        sa.Column("credit", sa.Numeric(19, 4), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index(
        "ix_journal_entry_details_entry_id",
        "journal_entry_details",
        ["entry_id"],
    )
    op.create_index(
        "ix_journal_entry_details_account_id",
        "journal_entry_details",
        ["account_id"],
    )


def downgrade() -> None:
    op.drop_index(
        "ix_journal_entry_details_account_id", table_name="journal_entry_details"
    )
    op.drop_index(
        "ix_journal_entry_details_entry_id", table_name="journal_entry_details"
    )
    op.drop_table("journal_entry_details")
    op.drop_index(
        "ix_journal_entries_organization_id", table_name="journal_entries"
    )
    op.drop_table("journal_entries")
    op.drop_index("ix_accounts_organization_id", table_name="accounts")
    op.drop_table("accounts")
    op.drop_table("organizations")
