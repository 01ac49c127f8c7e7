"""카테고리 라우터 — 카테고리 CRUD 및 카테고리별 게시글 엔드포인트.

Category Router — Category endpoints and posts by category.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.category import CategoryCreate, CategoryDTO
from app.schemas.post import PostDTO
from app.services.category_service import category_service

router: APIRouter = APIRouter()


@router.post("", response_model=CategoryDTO, status_code=201)
async def create_category(
    data: CategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CategoryDTO:
    """새 카테고리를 생성합니다.

    Create a new category.
    """
    result: CategoryDTO = await category_service.create_category(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[CategoryDTO])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CategoryDTO]:
    """카테고리 목록을 조회합니다 (List categories)."""
    return await category_service.list_categories(db)


@router.get("/{category_id}/posts", response_model=list[PostDTO])
async def list_category_posts(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PostDTO]:
    """카테고리에 속한 게시글을 조회합니다 (Posts filed under a category)."""
    return await category_service.get_posts_by_category(db, category_id)
