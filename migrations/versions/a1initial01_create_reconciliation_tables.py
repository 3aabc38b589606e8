"""create clients, users, check_ins, operator_counts, alerts, tasks

Revision ID: a1initial01
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa


revision = 'a1initial01'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'clients',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=160), nullable=False),
        sa.Column('tax_id', sa.String(length=40), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_clients_name', 'clients', ['name'], unique=False)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=180), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'], unique=False)

    op.create_table(
        'check_ins',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('invoice_number', sa.String(length=60), nullable=False),
        sa.Column('client_id', sa.Integer(), sa.ForeignKey('clients.id'), nullable=False),
        sa.Column('seal_number', sa.String(length=60), nullable=True),
        sa.Column('declared_value', sa.Numeric(14, 2), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Pendiente'),
        sa.Column('digitizer_status', sa.String(length=32), nullable=True),
        sa.Column('closed_by_digitizer_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_check_ins_invoice_number', 'check_ins', ['invoice_number'], unique=True)
    op.create_index('ix_check_ins_client_id', 'check_ins', ['client_id'], unique=False)
    op.create_index('ix_check_ins_status', 'check_ins', ['status'], unique=False)
    op.create_index('ix_check_ins_created_at', 'check_ins', ['created_at'], unique=False)

    op.create_table(
        'operator_counts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('check_in_id', sa.Integer(), sa.ForeignKey('check_ins.id'), nullable=False),
        sa.Column('operator_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('bills_100k', sa.Integer(), nullable=False),
        sa.Column('bills_50k', sa.Integer(), nullable=False),
        sa.Column('bills_20k', sa.Integer(), nullable=False),
        sa.Column('bills_10k', sa.Integer(), nullable=False),
        sa.Column('bills_5k', sa.Integer(), nullable=False),
        sa.Column('bills_2k', sa.Integer(), nullable=False),
        sa.Column('coins', sa.Numeric(14, 2), nullable=False),
        sa.Column('total_counted', sa.Numeric(14, 2), nullable=False),
        sa.Column('discrepancy', sa.Numeric(14, 2), nullable=False),
        sa.Column('observations', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_operator_counts_check_in_id', 'operator_counts', ['check_in_id'], unique=False)
    op.create_index('ix_operator_counts_operator_id', 'operator_counts', ['operator_id'], unique=False)
    op.create_index('ix_operator_counts_created_at', 'operator_counts', ['created_at'], unique=False)

    op.create_table(
        'alerts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('priority', sa.String(length=20), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('suggested_role', sa.String(length=20), nullable=True),
        sa.Column('check_in_id', sa.Integer(), sa.ForeignKey('check_ins.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_alerts_status', 'alerts', ['status'], unique=False)
    op.create_index('ix_alerts_check_in_id', 'alerts', ['check_in_id'], unique=False)
    op.create_index('ix_alerts_created_at', 'alerts', ['created_at'], unique=False)

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('alert_id', sa.Integer(), sa.ForeignKey('alerts.id'), nullable=False),
        sa.Column('assigned_to_group', sa.String(length=20), nullable=False),
        sa.Column('instruction', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('priority', sa.String(length=20), nullable=False),
        sa.Column('created_by_user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_tasks_alert_id', 'tasks', ['alert_id'], unique=False)
    op.create_index('ix_tasks_assigned_to_group', 'tasks', ['assigned_to_group'], unique=False)
    op.create_index('ix_tasks_status', 'tasks', ['status'], unique=False)
    op.create_index('ix_tasks_created_at', 'tasks', ['created_at'], unique=False)


def downgrade():
    op.drop_table('tasks')
    op.drop_table('alerts')
    op.drop_table('operator_counts')
    op.drop_table('check_ins')
    op.drop_table('users')
    op.drop_table('clients')
