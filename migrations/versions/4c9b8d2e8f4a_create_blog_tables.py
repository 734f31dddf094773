"""create blog tables

Revision ID: 4c9b8d2e8f4a
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c9b8d2e8f4a'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('email', sa.String(length=254), nullable=False),
            sa.Column('password_hash', sa.String(length=255), nullable=False),
            sa.Column('role', sa.String(length=20), nullable=True),
            sa.Column('image', sa.String(length=2048), nullable=True),
            sa.Column('bio', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    if not inspector.has_table('posts'):
        op.create_table(
            'posts',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('slug', sa.String(length=255), nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('excerpt', sa.String(length=500), nullable=True),
            sa.Column('cover_image', sa.String(length=2048), nullable=False),
            sa.Column('author_id', sa.Integer(), nullable=True),
            sa.Column('published', sa.Boolean(), nullable=False),
            sa.Column('likes', sa.JSON(), nullable=False),
            sa.Column('dislikes', sa.JSON(), nullable=False),
            sa.Column('tags', sa.JSON(), nullable=False),
            sa.Column('version', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='SET NULL'),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f('ix_posts_id'), 'posts', ['id'], unique=False)
        op.create_index(op.f('ix_posts_slug'), 'posts', ['slug'], unique=True)
        op.create_index(op.f('ix_posts_author_id'), 'posts', ['author_id'], unique=False)
        op.create_index('ix_posts_published_created_at', 'posts', ['published', 'created_at'], unique=False)

    if not inspector.has_table('comments'):
        op.create_table(
            'comments',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('author_id', sa.Integer(), nullable=True),
            sa.Column('post_id', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='SET NULL'),
            sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f('ix_comments_id'), 'comments', ['id'], unique=False)
        op.create_index(op.f('ix_comments_author_id'), 'comments', ['author_id'], unique=False)
        op.create_index('ix_comments_post_id_created_at', 'comments', ['post_id', 'created_at'], unique=False)

    if not inspector.has_table('newsletter_subscriptions'):
        op.create_table(
            'newsletter_subscriptions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(length=254), nullable=False),
            sa.Column('subscribed', sa.Boolean(), nullable=False),
            sa.Column('subscribed_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('unsubscribed_at', sa.DateTime(timezone=True), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f('ix_newsletter_subscriptions_id'), 'newsletter_subscriptions', ['id'], unique=False)
        op.create_index(
            op.f('ix_newsletter_subscriptions_email'),
            'newsletter_subscriptions',
            ['email'],
            unique=True,
        )


def downgrade() -> None:
    op.drop_index(op.f('ix_newsletter_subscriptions_email'), table_name='newsletter_subscriptions')
    op.drop_index(op.f('ix_newsletter_subscriptions_id'), table_name='newsletter_subscriptions')
    op.drop_table('newsletter_subscriptions')

    op.drop_index('ix_comments_post_id_created_at', table_name='comments')
    op.drop_index(op.f('ix_comments_author_id'), table_name='comments')
    op.drop_index(op.f('ix_comments_id'), table_name='comments')
    op.drop_table('comments')

    op.drop_index('ix_posts_published_created_at', table_name='posts')
    op.drop_index(op.f('ix_posts_author_id'), table_name='posts')
    op.drop_index(op.f('ix_posts_slug'), table_name='posts')
    op.drop_index(op.f('ix_posts_id'), table_name='posts')
    op.drop_table('posts')

    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
