"""게시글 라우터 — 게시글 검색 및 상세 엔드포인트.

Post Router — Filtered post search and post detail endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.post import PostDetailDTO, PostDTO
from app.services.post_service import post_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/search", response_model=Page[PostDTO])
async def search_posts(
    db: Annotated[AsyncSession, Depends(get_db)],
    keyword: str | None = None,
    category: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> Page[PostDTO]:
    """제목 키워드와 카테고리 이름으로 게시글을 검색합니다.

    Search posts. ``keyword`` matches titles case-insensitively,
    ``category`` matches the category name exactly. Omitted or empty
    parameters do not filter.
    """
    return await post_service.search_posts(db, keyword, category, page, per_page)


@router.get("/{post_id}", response_model=PostDetailDTO)
async def get_post(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostDetailDTO:
    """게시글 상세(작성자, 댓글 포함)를 조회합니다.

    Retrieve a post with its author and comments.
    """
    return await post_service.get_post_detail(db, post_id)
