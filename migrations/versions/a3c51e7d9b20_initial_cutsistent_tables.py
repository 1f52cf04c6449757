"""initial cutsistent tables

Revision ID: a3c51e7d9b20
Revises:
Create Date: 2026-10-19 09:12:44.218301

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a3c51e7d9b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(120), nullable=False, server_default=''),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('username', sa.String(50), unique=True),
        sa.Column('display_name', sa.String(120)),
        sa.Column('avatar_url', sa.String(500)),
        sa.Column('bio', sa.Text()),
        sa.Column('current_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('longest_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('calorie_goal', sa.Integer(), nullable=False, server_default='2000'),
        sa.Column('protein_goal', sa.Integer(), nullable=False, server_default='150'),
        sa.Column('carbs_goal', sa.Integer(), nullable=False, server_default='200'),
        sa.Column('sugar_limit', sa.Numeric(6, 2), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'food_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('calories', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('protein', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('carbs', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('sugar', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('image_url', sa.String(500)),
        sa.Column('logged_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'daily_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('log_date', sa.Date(), nullable=False),
        sa.Column('total_calories', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_protein', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('total_carbs', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('total_sugar', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('is_sugar_free', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('points_earned', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'log_date', name='uq_daily_logs_user_date'),
    )

    # Helpful indexes
    op.create_index('ix_food_entries_user_id', 'food_entries', ['user_id'])
    op.create_index('ix_food_entries_user_logged', 'food_entries', ['user_id', 'logged_at'])
    op.create_index('ix_profiles_total_points', 'profiles', ['total_points'])


def downgrade():
    op.drop_index('ix_profiles_total_points', table_name='profiles')
    op.drop_index('ix_food_entries_user_logged', table_name='food_entries')
    op.drop_index('ix_food_entries_user_id', table_name='food_entries')
    op.drop_table('daily_logs')
    op.drop_table('food_entries')
    op.drop_table('profiles')
    op.drop_table('users')
