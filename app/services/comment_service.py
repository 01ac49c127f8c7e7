"""댓글 서비스 — 댓글 작성 및 게시글별 댓글 조회.

Comment Service — Business logic for adding and listing comments.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.repositories.comment_repository import CommentRepository, comment_repository
from app.repositories.post_repository import PostRepository, post_repository
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.comment import CommentCreate, CommentDTO
from app.services.mappers import to_comment_dto
from app.utils.exceptions import NotFoundError


class CommentService:
    """댓글 관련 비즈니스 로직을 처리하는 서비스.

    Service handling comment business logic.
    """

    def __init__(
        self,
        comments: CommentRepository = comment_repository,
        users: UserRepository = user_repository,
        posts: PostRepository = post_repository,
    ) -> None:
        self.comments: CommentRepository = comments
        self.users: UserRepository = users
        self.posts: PostRepository = posts

    async def add_comment(self, db: AsyncSession, data: CommentCreate) -> CommentDTO:
        """게시글에 댓글을 작성합니다.

        Add a comment to a post.

        Raises:
            NotFoundError: 사용자 또는 게시글을 찾을 수 없을 때 (User or post not found)
        """
        if await self.users.get_by_id(db, data.user_id) is None:
            raise NotFoundError("User not found")
        if await self.posts.get_by_id(db, data.post_id) is None:
            raise NotFoundError("Post not found")

        comment: Comment = await self.comments.create(
            db, {"text": data.text, "user_id": data.user_id, "post_id": data.post_id}
        )
        return to_comment_dto(await self.comments.get_view(db, comment.id))

    async def get_comments_by_post(self, db: AsyncSession, post_id: int) -> list[CommentDTO]:
        """게시글의 댓글을 최신순으로 조회합니다 (Comments on a post, newest first)."""
        return [to_comment_dto(v) for v in await self.comments.get_views_by_post(db, post_id)]


# 싱글턴 인스턴스 — Singleton instance
comment_service: CommentService = CommentService()
