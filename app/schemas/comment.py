"""댓글 및 좋아요 관련 Pydantic 요청/응답 스키마 정의.

Comment and PostLike Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.common import NonBlankStr


class CommentCreate(BaseModel):
    """댓글 생성 요청 스키마.

    Attributes:
        text: 댓글 내용 (Non-blank text)
        user_id: 작성자 ID (Author identifier)
        post_id: 게시글 ID (Post identifier)
    """

    text: NonBlankStr
    user_id: int
    post_id: int


class CommentDTO(BaseModel):
    """댓글 응답 스키마 (Flat comment shape with author name)."""

    id: int
    text: str
    user_id: int
    user_name: str
    post_id: int
    created_at: datetime


class PostLikeCreate(BaseModel):
    """좋아요 요청 스키마 (Like request)."""

    user_id: int
    post_id: int
