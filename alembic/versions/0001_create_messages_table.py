"""Create messages table

Revision ID: 0001_create_messages
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_create_messages'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('remetente_nome', sa.String(length=255), nullable=False),
        sa.Column('destinatario_nome', sa.String(length=255), nullable=False),
        sa.Column('mensagem', sa.Text(), nullable=False),
        sa.Column('isprinted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('printed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='active'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_messages')),
    )
    op.create_index(op.f('ix_messages_status'), 'messages', ['status'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_messages_status'), table_name='messages')
    op.drop_table('messages')
