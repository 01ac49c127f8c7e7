"""댓글 레포지토리 — 댓글 생성 및 댓글 프로젝션.

Comment Repository — Comment creation and comment projections joined with
the author's id and name.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.models.user import User
from app.repositories.base import BaseRepository
from app.repositories.projections import AuthorSummary, CommentView


class CommentRepository(BaseRepository[Comment]):
    """댓글 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the comments table.
    """

    def __init__(self) -> None:
        super().__init__(Comment)

    def view_query(self) -> Select:
        """CommentView 컬럼과 작성자 요약을 한 번에 선택하는 쿼리.

        Column-selection query behind ``CommentView``, newest first.
        """
        return (
            select(
                Comment.id,
                Comment.text,
                Comment.created_at,
                Comment.post_id,
                User.id.label("user_id"),
                User.name.label("user_name"),
            )
            .join(User, Comment.user_id == User.id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )

    @staticmethod
    def _to_view(row) -> CommentView:
        return CommentView(
            id=row.id,
            text=row.text,
            created_at=row.created_at,
            user=AuthorSummary(id=row.user_id, name=row.user_name),
            post_id=row.post_id,
        )

    async def get_view(self, db: AsyncSession, comment_id: int) -> CommentView | None:
        row = (await db.execute(self.view_query().where(Comment.id == comment_id))).one_or_none()
        return self._to_view(row) if row is not None else None

    async def get_views_by_post(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> list[CommentView]:
        """게시글의 댓글을 작성자 요약과 함께 최신순으로 조회합니다.

        Retrieve a post's comments newest first, joined with the author's
        id and name in a single statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post identifier)

        Returns:
            list[CommentView]: 댓글 뷰 목록 (Comment views)
        """
        result = await db.execute(self.view_query().where(Comment.post_id == post_id))
        return [self._to_view(row) for row in result.all()]


# 싱글턴 인스턴스 — Singleton instance
comment_repository: CommentRepository = CommentRepository()
