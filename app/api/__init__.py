"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every resource router into a single router
for inclusion in the FastAPI application.

Included routers:
    - users: 사용자 및 사용자별 게시글 (Users and their posts)
    - posts: 게시글 검색 및 상세 (Post search and detail)
    - categories: 카테고리 및 카테고리별 게시글 (Categories and their posts)
    - comments: 댓글 (Comments)
    - likes: 좋아요 (Likes)
    - reports: 활동 리포트 (Activity reports)
"""

from fastapi import APIRouter

from app.api.users import router as users_router
from app.api.posts import router as posts_router
from app.api.categories import router as categories_router
from app.api.comments import router as comments_router
from app.api.likes import router as likes_router
from app.api.reports import router as reports_router

api_router: APIRouter = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(posts_router, prefix="/posts", tags=["Posts"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(comments_router, prefix="/comments", tags=["Comments"])
api_router.include_router(likes_router, prefix="/likes", tags=["Likes"])
api_router.include_router(reports_router, prefix="/reports", tags=["Reports"])
