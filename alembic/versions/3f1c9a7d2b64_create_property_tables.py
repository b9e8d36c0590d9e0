"""create_property_tables

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 10:12:41.508331

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("company", sa.String(), nullable=True),
        *_base_columns(),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "condominiums",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("city", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("postal_code", sa.String(), nullable=False),
        sa.Column("tax_number", sa.Integer(), nullable=False),
        sa.Column("iban", sa.String(), nullable=False),
        sa.Column("bank", sa.String(), nullable=False),
        sa.Column("unit_count", sa.Integer(), nullable=False),
        sa.Column("floor_count", sa.Integer(), nullable=False),
        sa.Column("construction_year", sa.Integer(), nullable=False),
        sa.Column("has_elevator", sa.Boolean(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        *_base_columns(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_table(
        "assets",
        sa.Column("condominium_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("brand", sa.String(), nullable=False),
        sa.Column("model", sa.String(), nullable=False),
        sa.Column("serial_number", sa.BigInteger(), nullable=False),
        sa.Column("installed_on", sa.Date(), nullable=False),
        sa.Column(
            "condition",
            sa.Enum("excellent", "good", "fair", "poor", name="assetcondition"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
        *_base_columns(),
        sa.ForeignKeyConstraint(
            ["condominium_id"], ["condominiums.id"], ondelete="CASCADE"
        ),
    )
    op.create_table(
        "alerts",
        sa.Column("asset_id", sa.Uuid(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("pending", "resolved", name="alertstatus"),
            nullable=False,
        ),
        *_base_columns(),
        sa.ForeignKeyConstraint(["asset_id"], ["assets.id"], ondelete="CASCADE"),
    )
    op.create_table(
        "maintenances",
        sa.Column("asset_id", sa.Uuid(), nullable=False),
        sa.Column(
            "kind",
            sa.Enum("preventive", "corrective", name="maintenancekind"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cost", sa.Float(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("pending", "completed", name="maintenancestatus"),
            nullable=False,
        ),
        *_base_columns(),
        sa.ForeignKeyConstraint(["asset_id"], ["assets.id"], ondelete="CASCADE"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("maintenances")
    op.drop_table("alerts")
    op.drop_table("assets")
    op.drop_table("condominiums")
    op.drop_table("users")
    for enum_name in (
        "maintenancestatus",
        "maintenancekind",
        "alertstatus",
        "assetcondition",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
