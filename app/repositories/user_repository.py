"""사용자 레포지토리 — 사용자 CRUD, 게시글 즉시 로딩, 요약 프로젝션.

User Repository — CRUD, eager post loading and summary projection for users.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.post import Post
from app.models.user import User
from app.repositories.base import BaseRepository
from app.repositories.projections import UserSummary


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    Post collections are loaded with SELECT IN, together with each post's
    category, so mapping never touches a lazy reference.
    """

    def __init__(self) -> None:
        super().__init__(User)

    def _with_posts(self) -> Select:
        # populate_existing: 세션에 이미 있는 사용자도 게시글 목록을 다시 로드
        # Reload post collections even for users already in the identity map
        return (
            select(User)
            .options(selectinload(User.posts).selectinload(Post.category))
            .execution_options(populate_existing=True)
        )

    async def get_all_with_posts(self, db: AsyncSession) -> Sequence[User]:
        """모든 사용자를 게시글과 함께 조회합니다 (All users with posts loaded)."""
        result = await db.execute(self._with_posts().order_by(User.id))
        return result.scalars().all()

    async def get_with_posts(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> User | None:
        """사용자를 게시글과 함께 조회합니다.

        Retrieve a user with posts and their categories eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User identifier)

        Returns:
            User | None: 게시글이 로드된 사용자 또는 None (User with posts, or None)
        """
        result = await db.execute(self._with_posts().where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_summaries(self, db: AsyncSession) -> list[UserSummary]:
        """id, name, email 컬럼만 선택해 사용자 요약을 조회합니다.

        Retrieve user summaries by selecting only id, name and email.
        """
        query: Select = select(User.id, User.name, User.email).order_by(User.id)
        result = await db.execute(query)
        return [UserSummary(id=row.id, name=row.name, email=row.email) for row in result.all()]


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
