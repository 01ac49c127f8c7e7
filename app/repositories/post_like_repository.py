"""좋아요 레포지토리 — 좋아요 존재 확인, 네이티브 카운트/삭제, 활동 리포트.

PostLike Repository — Like existence checks, native count/delete statements
and the top-active-users report.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import PostLike
from app.repositories.base import BaseRepository
from app.repositories.projections import UserActivityReport

# 활동 리포트 — 댓글 수 + 좋아요 수 상위 사용자
# Users ranked by distinct comments plus distinct likes
_TOP_ACTIVE_USERS_SQL = text(
    """
    SELECT
        u.id AS user_id,
        u.name AS user_name,
        (COUNT(DISTINCT c.id) + COUNT(DISTINCT pl.id)) AS activity_count
    FROM users u
    LEFT JOIN comments c ON u.id = c.user_id
    LEFT JOIN post_likes pl ON u.id = pl.user_id
    GROUP BY u.id, u.name
    ORDER BY activity_count DESC, u.id
    LIMIT :limit
    """
)


class PostLikeRepository(BaseRepository[PostLike]):
    """좋아요 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the post_likes table.
    """

    def __init__(self) -> None:
        super().__init__(PostLike)

    async def exists_by_user_and_post(
        self,
        db: AsyncSession,
        user_id: int,
        post_id: int,
    ) -> bool:
        return await self.exists(db, {"user_id": user_id, "post_id": post_id})

    async def count_by_post(self, db: AsyncSession, post_id: int) -> int:
        """게시글의 좋아요 수를 반환합니다 (Count likes on a post)."""
        result = await db.execute(
            text("SELECT COUNT(*) FROM post_likes WHERE post_id = :post_id"),
            {"post_id": post_id},
        )
        return result.scalar() or 0

    async def delete_by_user_and_post(
        self,
        db: AsyncSession,
        user_id: int,
        post_id: int,
    ) -> int:
        """사용자의 게시글 좋아요를 삭제하고 삭제된 행 수를 반환합니다.

        Delete a user's like on a post; returns the number of rows removed.
        """
        result = await db.execute(
            text("DELETE FROM post_likes WHERE user_id = :user_id AND post_id = :post_id"),
            {"user_id": user_id, "post_id": post_id},
        )
        return result.rowcount or 0

    async def get_top_active_users(
        self,
        db: AsyncSession,
        limit: int = 5,
    ) -> list[UserActivityReport]:
        """댓글+좋아요 활동이 많은 상위 사용자를 조회합니다.

        Retrieve the most active users by comments plus likes.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            limit: 최대 행 수 (Maximum rows)

        Returns:
            list[UserActivityReport]: 활동 리포트 행 (Report rows, most active first)
        """
        result = await db.execute(_TOP_ACTIVE_USERS_SQL, {"limit": limit})
        return [
            UserActivityReport(
                user_id=row.user_id,
                user_name=row.user_name,
                activity_count=row.activity_count,
            )
            for row in result.all()
        ]


# 싱글턴 인스턴스 — Singleton instance
post_like_repository: PostLikeRepository = PostLikeRepository()
