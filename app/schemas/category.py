"""카테고리 관련 Pydantic 요청/응답 스키마 정의.

Category Pydantic request/response schema definitions.
"""

from pydantic import BaseModel

from app.schemas.common import NonBlankStr


class CategoryCreate(BaseModel):
    """카테고리 생성 요청 스키마.

    Attributes:
        name: 카테고리 이름 (Unique, non-blank name)
        description: 설명 (Optional description)
    """

    name: NonBlankStr
    description: str | None = None


class CategoryDTO(BaseModel):
    """카테고리 응답 스키마."""

    id: int
    name: str
    description: str | None = None
