"""게시글 관련 Pydantic 요청/응답 스키마 정의.

Post Pydantic request/response schema definitions.
``PostDTO`` is flat: the optional category is exposed as
``category_id``/``category_name`` rather than a nested object.
"""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.common import NonBlankStr


class PostCreate(BaseModel):
    """게시글 생성 요청 스키마.

    Post creation request schema. The author comes from the URL path.

    Attributes:
        title: 제목 (Non-blank title)
        content: 본문 (Non-blank content)
        category_id: 카테고리 ID (Optional category identifier)
    """

    title: NonBlankStr
    content: NonBlankStr
    category_id: int | None = None


class PostDTO(BaseModel):
    """게시글 응답 스키마 (Flat post shape)."""

    id: int
    title: str
    content: str
    category_id: int | None = None  # 카테고리 없으면 null (null when uncategorised)
    category_name: str | None = None


class PostCommentDTO(BaseModel):
    """게시글 상세에 포함되는 댓글 (Comment embedded in a post detail)."""

    id: int
    text: str
    user_id: int
    user_name: str
    created_at: datetime


class PostDetailDTO(PostDTO):
    """게시글 상세 응답 — 작성자와 댓글 포함.

    Post detail response with author and comments, built from an eagerly
    loaded entity graph.
    """

    user_id: int
    user_name: str
    comments: list[PostCommentDTO] = []
