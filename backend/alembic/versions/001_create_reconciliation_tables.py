"""create accounts, transactions, recurring expenses and reconciliation checks

Revision ID: 001
Revises: 
Create Date: 2026-10-18 10:00:00
"""

from alembic import op
import sqlalchemy as sa


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "account_type",
            sa.Enum("checking", "savings", "credit", "cash", "investment", "other", name="accounttype"),
            nullable=False,
        ),
        sa.Column("external_account_id", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category_type", sa.Enum("income", "expense", "transfer", name="categorytype"), nullable=False),
        sa.Column("color", sa.String(7), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "transactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False, index=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("transaction_type", sa.Enum("income", "expense", name="transactiontype"), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("account_id", sa.String(36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("category_id", sa.String(36), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("external_id", sa.String(100), nullable=True, index=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("idx_transaction_date_account", "transactions", ["date", "account_id"])

    op.create_table(
        "recurring_expenses",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("account_id", sa.String(36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("category_id", sa.String(36), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("day_of_month", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("match_pattern", sa.String(255), nullable=True),
        sa.Column("is_variable_amount", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "reconciliation_checks",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("recurring_expense_id", sa.String(36), sa.ForeignKey("recurring_expenses.id"), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("status", sa.Enum("MATCHED", "MISSING", "PENDING", name="checkstatus"), nullable=False),
        sa.Column("matched_transaction_id", sa.String(36), sa.ForeignKey("transactions.id"), nullable=True),
        sa.Column("matched_date", sa.Date(), nullable=True),
        sa.Column("matched_amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("checked_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("recurring_expense_id", "month", "year", name="uq_reconciliation_check_period"),
    )


def downgrade() -> None:
    op.drop_table("reconciliation_checks")
    op.drop_table("recurring_expenses")
    op.drop_index("idx_transaction_date_account", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("categories")
    op.drop_table("accounts")
