"""댓글 라우터 — 댓글 작성 및 게시글별 댓글 조회 엔드포인트.

Comment Router — Add comments and list comments of a post.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.comment import CommentCreate, CommentDTO
from app.services.comment_service import comment_service

router: APIRouter = APIRouter()


@router.post("", response_model=CommentDTO, status_code=201)
async def add_comment(
    data: CommentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CommentDTO:
    """게시글에 댓글을 작성합니다 (Add a comment)."""
    result: CommentDTO = await comment_service.add_comment(db, data)
    await db.commit()
    return result


@router.get("/post/{post_id}", response_model=list[CommentDTO])
async def list_post_comments(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CommentDTO]:
    """게시글의 댓글을 최신순으로 조회합니다 (Comments on a post, newest first)."""
    return await comment_service.get_comments_by_post(db, post_id)
