"""Create guests, rsvps, wedding_photos and wedding_info tables

Revision ID: 3f9c2a1b7d40
Revises:
Create Date: 2026-10-17 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f9c2a1b7d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        'guests',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=True),
        sa.Column('phone', sa.Text(), nullable=True),
        _timestamp('created_at'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_guests_name'), 'guests', ['name'], unique=False)

    op.create_table(
        'rsvps',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('guest_id', sa.Integer(), nullable=False),
        sa.Column('will_attend', sa.Boolean(), nullable=False),
        sa.Column('number_of_guests', sa.Integer(), nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['guest_id'], ['guests.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('guest_id', name='uq_rsvps_guest_id'),
        sa.CheckConstraint(
            'number_of_guests BETWEEN 1 AND 10', name='ck_rsvps_number_of_guests'
        ),
    )

    op.create_table(
        'wedding_photos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('alt_text', sa.Text(), nullable=True),
        sa.Column('is_main_photo', sa.Boolean(), nullable=False),
        sa.Column('gallery_order', sa.Integer(), nullable=True),
        _timestamp('created_at'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'wedding_info',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bride_full_name', sa.Text(), nullable=False),
        sa.Column('bride_nickname', sa.Text(), nullable=False),
        sa.Column('bride_father', sa.Text(), nullable=False),
        sa.Column('bride_mother', sa.Text(), nullable=False),
        sa.Column('groom_full_name', sa.Text(), nullable=False),
        sa.Column('groom_nickname', sa.Text(), nullable=False),
        sa.Column('groom_father', sa.Text(), nullable=False),
        sa.Column('groom_mother', sa.Text(), nullable=False),
        sa.Column('ceremony_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ceremony_time_start', sa.Text(), nullable=False),
        sa.Column('ceremony_time_end', sa.Text(), nullable=False),
        sa.Column('ceremony_location', sa.Text(), nullable=False),
        sa.Column('reception_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('reception_time_start', sa.Text(), nullable=False),
        sa.Column('reception_time_end', sa.Text(), nullable=False),
        sa.Column('reception_location', sa.Text(), nullable=False),
        sa.Column('reception_maps_url', sa.Text(), nullable=True),
        sa.Column('bank_name', sa.Text(), nullable=False),
        sa.Column('account_holder', sa.Text(), nullable=False),
        sa.Column('account_number', sa.Text(), nullable=False),
        sa.Column('rsvp_message', sa.Text(), nullable=False),
        sa.Column('rsvp_deadline', sa.DateTime(timezone=True), nullable=False),
        sa.Column('co_invitation_message', sa.Text(), nullable=False),
        sa.Column('quran_verse', sa.Text(), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('id = 1', name='ck_wedding_info_singleton'),
    )


def downgrade() -> None:
    op.drop_table('wedding_info')
    op.drop_table('wedding_photos')
    op.drop_table('rsvps')
    op.drop_index(op.f('ix_guests_name'), table_name='guests')
    op.drop_table('guests')
