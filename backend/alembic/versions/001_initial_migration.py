"""Initial migration - create every table

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


BED_STATUS = sa.Enum('AVAILABLE', 'OCCUPIED', 'MAINTENANCE', 'RESERVED', name='bedstatusenum')


def upgrade() -> None:
    """Creates every table of the system."""
    
    # Specialty group table
    op.create_table(
        'specialty_group',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('code', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, default=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_specialty_group_code', 'specialty_group', ['code'], unique=True)
    
    # Specialty table
    op.create_table(
        'specialty',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('code', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('specialty_group', sa.String(length=150), nullable=False),
        sa.Column('specialty_group_id', sa.String(), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, default=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['specialty_group_id'], ['specialty_group.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_specialty_code', 'specialty', ['code'], unique=True)
    op.create_index('ix_specialty_specialty_group', 'specialty', ['specialty_group'])
    
    # Hospital table
    op.create_table(
        'hospital',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('city', sa.String(), nullable=False),
        sa.Column('postal_code', sa.String(length=20), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('phone_number', sa.String(length=30), nullable=True),
        sa.Column('total_beds', sa.Integer(), nullable=True),
        sa.Column('available_beds', sa.Integer(), nullable=False, default=0),
        sa.Column('is_active', sa.Boolean(), nullable=False, default=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_hospital_name', 'hospital', ['name'], unique=True)
    op.create_index('ix_hospital_city', 'hospital', ['city'])
    op.create_index('ix_hospital_is_active', 'hospital', ['is_active'])
    
    # Hospital <-> specialty link table
    op.create_table(
        'hospital_specialty',
        sa.Column('hospital_id', sa.String(), nullable=False),
        sa.Column('specialty_id', sa.String(), nullable=False),
        sa.ForeignKeyConstraint(['hospital_id'], ['hospital.id']),
        sa.ForeignKeyConstraint(['specialty_id'], ['specialty.id']),
        sa.PrimaryKeyConstraint('hospital_id', 'specialty_id')
    )
    
    # Bed table
    op.create_table(
        'bed',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('hospital_id', sa.String(), nullable=False),
        sa.Column('specialty_id', sa.String(), nullable=False),
        sa.Column('bed_number', sa.String(), nullable=False),
        sa.Column('room_number', sa.String(), nullable=True),
        sa.Column('floor', sa.Integer(), nullable=True),
        sa.Column('status', BED_STATUS, nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False, default=True),
        sa.Column('last_occupied_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, default=0),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['hospital_id'], ['hospital.id']),
        sa.ForeignKeyConstraint(['specialty_id'], ['specialty.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('hospital_id', 'bed_number', name='uk_bed_hospital_bed_number')
    )
    op.create_index('ix_bed_hospital_id', 'bed', ['hospital_id'])
    op.create_index('ix_bed_specialty_id', 'bed', ['specialty_id'])
    op.create_index('ix_bed_status', 'bed', ['status'])
    op.create_index('ix_bed_is_available', 'bed', ['is_available'])


def downgrade() -> None:
    """Drops every table of the system."""
    op.drop_table('bed')
    op.drop_table('hospital_specialty')
    op.drop_table('hospital')
    op.drop_table('specialty')
    op.drop_table('specialty_group')
    BED_STATUS.drop(op.get_bind(), checkfirst=True)
