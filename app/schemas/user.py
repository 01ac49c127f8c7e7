"""사용자 관련 Pydantic 요청/응답 스키마 정의.

User Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, EmailStr

from app.schemas.common import NonBlankStr
from app.schemas.post import PostDTO


class UserCreate(BaseModel):
    """사용자 생성 요청 스키마.

    Attributes:
        name: 이름 (Non-blank display name)
        email: 이메일 (Valid, unique email address)
    """

    name: NonBlankStr
    email: EmailStr


class UserDTO(BaseModel):
    """사용자 응답 스키마 — 작성 게시글 포함 (User with authored posts)."""

    id: int
    name: str
    email: str
    posts: list[PostDTO] | None = None


class UserSummaryDTO(BaseModel):
    """사용자 요약 응답 스키마 (id, name, email only)."""

    id: int
    name: str
    email: str
