"""create staff table

Revision ID: 3f2b9c1d7e40
Revises:
Create Date: 2026-10-19 09:12:31.402118

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f2b9c1d7e40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'staff',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('username', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('phone', sa.String(length=11), nullable=False),
        sa.Column('cnic', sa.String(length=13), nullable=False),
        sa.Column('password', sa.String(length=100), nullable=False),
        sa.Column('role', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('email', name='uq_staff_email'),
        sa.UniqueConstraint('phone', name='uq_staff_phone'),
        sa.UniqueConstraint('cnic', name='uq_staff_cnic'),
    )
    # occupancy counts per role
    op.create_index('ix_staff_role', 'staff', ['role'])


def downgrade() -> None:
    op.drop_index('ix_staff_role', table_name='staff')
    op.drop_table('staff')
