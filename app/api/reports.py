"""리포트 라우터 — 활동 리포트 엔드포인트.

Report Router — Activity report endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.report import UserActivityDTO
from app.services.post_like_service import post_like_service

router: APIRouter = APIRouter()


@router.get("/active-users", response_model=list[UserActivityDTO])
async def top_active_users(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[UserActivityDTO]:
    """댓글과 좋아요가 가장 많은 사용자를 조회합니다.

    Users ranked by comments plus likes, most active first.
    """
    return await post_like_service.get_top_active_users(db)
