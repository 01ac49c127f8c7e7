"""좋아요 라우터 — 좋아요, 취소, 좋아요 수 엔드포인트.

Like Router — Like, unlike and like-count endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.comment import PostLikeCreate
from app.services.post_like_service import post_like_service

router: APIRouter = APIRouter()


@router.post("", status_code=201)
async def like_post(
    data: PostLikeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """게시글에 좋아요를 누릅니다 (Like a post)."""
    await post_like_service.like_post(db, data)
    await db.commit()


@router.delete("/post/{post_id}/user/{user_id}", status_code=204)
async def unlike_post(
    post_id: int,
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """좋아요를 취소합니다 (Remove a like; idempotent)."""
    await post_like_service.unlike_post(db, user_id, post_id)
    await db.commit()


@router.get("/post/{post_id}/count", response_model=int)
async def count_likes(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> int:
    """게시글의 좋아요 수를 조회합니다 (Number of likes on a post)."""
    return await post_like_service.count_likes(db, post_id)
