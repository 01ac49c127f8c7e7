"""add_categories

Revision ID: d8e2b4c6a1f3
Revises: c3a1f0e2b7d4
Create Date: 2026-10-19 10:00:00.000000

카테고리 테이블 생성 및 게시글에 카테고리 FK 추가.
Add categories table and the nullable posts.category_id foreign key.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'd8e2b4c6a1f3'
down_revision: Union[str, None] = 'c3a1f0e2b7d4'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # categories — 카테고리 (unique name)
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False, unique=True),
        sa.Column('description', sa.String(255), nullable=True),
    )

    # posts.category_id — 카테고리 삭제 시 NULL (SET NULL on category delete)
    # batch 모드: SQLite에서도 FK 추가 가능 (batch mode keeps SQLite supported)
    with op.batch_alter_table('posts') as batch_op:
        batch_op.add_column(sa.Column('category_id', sa.Integer(), nullable=True))
        batch_op.create_foreign_key(
            'fk_posts_category', 'categories', ['category_id'], ['id'], ondelete='SET NULL'
        )
        batch_op.create_index('ix_posts_category', ['category_id'])


def downgrade() -> None:
    with op.batch_alter_table('posts') as batch_op:
        batch_op.drop_index('ix_posts_category')
        batch_op.drop_constraint('fk_posts_category', type_='foreignkey')
        batch_op.drop_column('category_id')
    op.drop_table('categories')
