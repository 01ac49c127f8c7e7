"""읽기 전용 프로젝션 모듈 — 레포지토리가 컬럼 선택 쿼리로 생성하는 뷰.

Read-only projections produced by repositories from column-selection queries.
Only the selected fields are fetched; callers never construct these directly.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class CategorySummary:
    """카테고리 요약 (Category id and name only)."""

    id: int
    name: str


@dataclass(frozen=True)
class PostView:
    """게시글 뷰 — 본문 필드와 한 단계 중첩된 카테고리 요약.

    Post view with one level of nested category summary.

    Attributes:
        id: 게시글 ID (Post identifier)
        title: 제목 (Title)
        content: 본문 (Content)
        category: 카테고리 요약, 없으면 None (Category summary or None)
    """

    id: int
    title: str
    content: str
    category: CategorySummary | None

    @classmethod
    def from_row(cls, row: Any) -> "PostView":
        """``post_id, title, content, category_id, category_name`` 행을 뷰로 변환합니다.

        Build a view from a row selected by ``PostRepository.view_query``.
        A NULL ``category_id`` (outer join miss) yields ``category=None``.
        """
        category: CategorySummary | None = None
        if row.category_id is not None:
            category = CategorySummary(id=row.category_id, name=row.category_name)
        return cls(id=row.post_id, title=row.title, content=row.content, category=category)


@dataclass(frozen=True)
class UserSummary:
    """사용자 요약 (User id, name and email)."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class AuthorSummary:
    id: int
    name: str


@dataclass(frozen=True)
class CommentView:
    """댓글 뷰 — 작성자 요약과 게시글 ID.

    Comment view with nested author summary and owning post id.
    """

    id: int
    text: str
    created_at: datetime
    user: AuthorSummary
    post_id: int


@dataclass(frozen=True)
class UserActivityReport:
    """사용자 활동 리포트 행 (Comments + likes per user)."""

    user_id: int
    user_name: str
    activity_count: int
