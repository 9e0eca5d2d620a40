"""
Create the pacientes, medicos and funcionarios tables.
"""
import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _person_columns():
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("idade", sa.Integer(), nullable=False),
        sa.Column("cpf", sa.String(length=14), nullable=False),
        sa.Column("dob", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    for table in ("pacientes", "funcionarios"):
        op.create_table(table, *_person_columns(), sqlite_autoincrement=True)
        op.create_index(f"ix_{table}_cpf", table, ["cpf"], unique=True)

    op.create_table(
        "medicos",
        *_person_columns(),
        sa.Column("crm", sa.String(length=20), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_medicos_cpf", "medicos", ["cpf"], unique=True)
    op.create_index("ix_medicos_crm", "medicos", ["crm"], unique=True)


def downgrade() -> None:
    for table in ("medicos", "funcionarios", "pacientes"):
        op.drop_table(table)
