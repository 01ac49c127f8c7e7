"""좋아요 서비스 — 좋아요/취소, 좋아요 수, 활동 리포트.

PostLike Service — Business logic for likes and the active-user report.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.repositories.post_like_repository import PostLikeRepository, post_like_repository
from app.repositories.post_repository import PostRepository, post_repository
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.comment import PostLikeCreate
from app.schemas.report import UserActivityDTO
from app.services.mappers import to_activity_dto
from app.utils.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class PostLikeService:
    """좋아요 관련 비즈니스 로직을 처리하는 서비스.

    Service handling post-like business logic.
    """

    def __init__(
        self,
        likes: PostLikeRepository = post_like_repository,
        users: UserRepository = user_repository,
        posts: PostRepository = post_repository,
    ) -> None:
        self.likes: PostLikeRepository = likes
        self.users: UserRepository = users
        self.posts: PostRepository = posts

    async def like_post(self, db: AsyncSession, data: PostLikeCreate) -> None:
        """게시글에 좋아요를 추가합니다.

        Record a user's like on a post.

        Raises:
            DuplicateError: 이미 좋아요한 게시글일 때 (Already liked)
            NotFoundError: 사용자 또는 게시글을 찾을 수 없을 때 (User or post not found)
        """
        if await self.likes.exists_by_user_and_post(db, data.user_id, data.post_id):
            raise DuplicateError("User already liked this post")
        if await self.users.get_by_id(db, data.user_id) is None:
            raise NotFoundError("User not found")
        if await self.posts.get_by_id(db, data.post_id) is None:
            raise NotFoundError("Post not found")

        await self.likes.create(db, {"user_id": data.user_id, "post_id": data.post_id})

    async def unlike_post(self, db: AsyncSession, user_id: int, post_id: int) -> None:
        """좋아요를 취소합니다. 없는 좋아요도 오류 없이 처리합니다.

        Remove a like; removing a like that does not exist is a no-op.
        """
        removed: int = await self.likes.delete_by_user_and_post(db, user_id, post_id)
        logger.debug("Removed %s like(s) for userId=%s postId=%s", removed, user_id, post_id)

    async def count_likes(self, db: AsyncSession, post_id: int) -> int:
        return await self.likes.count_by_post(db, post_id)

    async def get_top_active_users(self, db: AsyncSession) -> list[UserActivityDTO]:
        """활동량 상위 사용자 리포트를 조회합니다 (Most active users report)."""
        rows = await self.likes.get_top_active_users(db, settings.TOP_ACTIVE_USERS_LIMIT)
        return [to_activity_dto(r) for r in rows]


# 싱글턴 인스턴스 — Singleton instance
post_like_service: PostLikeService = PostLikeService()
