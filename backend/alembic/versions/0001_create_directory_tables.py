"""create employees and employee_pnl tables"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_directory_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("department", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="active"),
        sa.Column("manager_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(
            ["manager_id"],
            ["employees.id"],
            name="fk_employees_manager_id_employees",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_employees"),
        sa.UniqueConstraint("email", name="uq_employees_email"),
    )
    op.create_index("ix_employees_name", "employees", ["name"])
    op.create_index("ix_employees_department", "employees", ["department"])
    op.create_index("ix_employees_manager_id", "employees", ["manager_id"])

    op.create_table(
        "employee_pnl",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("attributed_revenue", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_cost", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(
            ["employee_id"],
            ["employees.id"],
            name="fk_employee_pnl_employee_id_employees",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_employee_pnl"),
        sa.UniqueConstraint("employee_id", "year", name="uq_employee_pnl_employee_year"),
    )
    op.create_index("ix_employee_pnl_employee_id", "employee_pnl", ["employee_id"])
    op.create_index("ix_employee_pnl_year", "employee_pnl", ["year"])


def downgrade() -> None:
    op.drop_index("ix_employee_pnl_year", table_name="employee_pnl")
    op.drop_index("ix_employee_pnl_employee_id", table_name="employee_pnl")
    op.drop_table("employee_pnl")
    op.drop_index("ix_employees_manager_id", table_name="employees")
    op.drop_index("ix_employees_department", table_name="employees")
    op.drop_index("ix_employees_name", table_name="employees")
    op.drop_table("employees")
