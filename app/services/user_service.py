"""사용자 서비스 — 사용자 CRUD 및 요약 조회 비즈니스 로직.

User Service — Business logic for user CRUD and summary projections.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.user import UserCreate, UserDTO, UserSummaryDTO
from app.services.mappers import to_user_dto, to_user_summary_dto
from app.utils.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """사용자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling user business logic.
    """

    def __init__(self, users: UserRepository = user_repository) -> None:
        self.users: UserRepository = users

    async def create_user(self, db: AsyncSession, data: UserCreate) -> UserDTO:
        """새 사용자를 생성합니다.

        Create a new user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 사용자 생성 데이터 (User creation data)

        Returns:
            UserDTO: 생성된 사용자 (Created user, with an empty post list)

        Raises:
            DuplicateError: 같은 이메일이 이미 존재할 때 (Email already registered)
        """
        if await self.users.exists(db, {"email": data.email}):
            raise DuplicateError("A user with this email already exists")

        user: User = await self.users.create(db, {"name": data.name, "email": data.email})
        logger.debug("Created user with id=%s", user.id)
        return to_user_dto(user, posts=[])

    async def list_users(self, db: AsyncSession) -> list[UserDTO]:
        """모든 사용자를 게시글과 함께 조회합니다 (All users with their posts)."""
        users = await self.users.get_all_with_posts(db)
        return [to_user_dto(u, posts=u.posts) for u in users]

    async def list_summaries(self, db: AsyncSession) -> list[UserSummaryDTO]:
        """사용자 요약 목록을 조회합니다 (Projected id/name/email list)."""
        return [to_user_summary_dto(s) for s in await self.users.get_summaries(db)]

    async def get_user(self, db: AsyncSession, user_id: int) -> UserDTO:
        """사용자를 게시글과 함께 조회합니다.

        Retrieve a user with posts.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        user: User | None = await self.users.get_with_posts(db, user_id)
        if user is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        return to_user_dto(user, posts=user.posts)

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        """사용자와 작성 데이터를 삭제합니다.

        Delete a user; posts, comments and likes are removed with it.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        deleted: bool = await self.users.delete(db, user_id)
        if not deleted:
            raise NotFoundError(f"User not found with id: {user_id}")
        logger.debug("Deleted user with id=%s", user_id)


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
