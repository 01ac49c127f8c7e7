"""사용자 라우터 — 사용자 CRUD 및 사용자별 게시글 엔드포인트.

User Router — User CRUD endpoints and the per-user post endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.post import PostCreate, PostDTO
from app.schemas.user import UserCreate, UserDTO, UserSummaryDTO
from app.services.post_service import post_service
from app.services.user_service import user_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("", response_model=UserDTO, status_code=201)
async def create_user(
    data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserDTO:
    """새 사용자를 생성합니다.

    Create a new user.
    """
    result: UserDTO = await user_service.create_user(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[UserDTO])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[UserDTO]:
    """모든 사용자를 게시글과 함께 조회합니다.

    List all users with their posts.
    """
    return await user_service.list_users(db)


@router.get("/summaries", response_model=list[UserSummaryDTO])
async def list_user_summaries(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[UserSummaryDTO]:
    """사용자 요약(id, name, email) 목록을 조회합니다.

    List projected user summaries.
    """
    return await user_service.list_summaries(db)


@router.get("/{user_id}", response_model=UserDTO)
async def get_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserDTO:
    """사용자를 게시글과 함께 조회합니다.

    Retrieve a user with their posts.
    """
    return await user_service.get_user(db, user_id)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """사용자를 삭제합니다.

    Delete a user and everything they authored.
    """
    await user_service.delete_user(db, user_id)
    await db.commit()


@router.post("/{user_id}/posts", response_model=PostDTO, status_code=201)
async def create_post(
    user_id: int,
    data: PostCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostDTO:
    """사용자의 새 게시글을 작성합니다.

    Create a post for a user.
    """
    result: PostDTO = await post_service.create_post(db, user_id, data)
    await db.commit()
    return result


@router.get("/{user_id}/posts", response_model=Page[PostDTO])
async def list_user_posts(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> Page[PostDTO]:
    """사용자가 작성한 게시글을 페이지 단위로 조회합니다.

    List one page of a user's posts.
    """
    return await post_service.get_posts_by_user(db, user_id, page, per_page)
