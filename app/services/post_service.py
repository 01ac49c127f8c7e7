"""게시글 서비스 — 게시글 생성, 조건 검색, 상세 조회 비즈니스 로직.

Post Service — Business logic for post creation, filtered search and
detail retrieval.

Search composes independent filters from optional user input:

    title_contains(keyword).and_(has_category(category))

Empty filters degrade to "match everything", never to "match nothing".
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Category, Post
from app.repositories.category_repository import CategoryRepository, category_repository
from app.repositories.post_repository import PostRepository, post_repository
from app.repositories.projections import PostView
from app.repositories.specifications import Specification, has_category, title_contains
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.post import PostCreate, PostDetailDTO, PostDTO
from app.services.mappers import to_post_detail_dto, to_post_dto
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Page

logger = logging.getLogger(__name__)


class PostService:
    """게시글 관련 비즈니스 로직을 처리하는 서비스.

    Service handling post business logic.
    """

    def __init__(
        self,
        posts: PostRepository = post_repository,
        users: UserRepository = user_repository,
        categories: CategoryRepository = category_repository,
    ) -> None:
        self.posts: PostRepository = posts
        self.users: UserRepository = users
        self.categories: CategoryRepository = categories

    async def create_post(
        self,
        db: AsyncSession,
        user_id: int,
        data: PostCreate,
    ) -> PostDTO:
        """사용자의 새 게시글을 생성합니다.

        Create a post for an existing user, optionally filed under a category.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 작성자 ID (Author identifier)
            data: 게시글 생성 데이터 (Post creation data)

        Returns:
            PostDTO: 생성된 게시글 (Created post)

        Raises:
            NotFoundError: 사용자 또는 카테고리를 찾을 수 없을 때 (User or category not found)
        """
        if await self.users.get_by_id(db, user_id) is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        if data.category_id is not None:
            category: Category | None = await self.categories.get_by_id(db, data.category_id)
            if category is None:
                raise NotFoundError(f"Category not found with id: {data.category_id}")

        post: Post = await self.posts.create(
            db,
            {
                "title": data.title,
                "content": data.content,
                "user_id": user_id,
                "category_id": data.category_id,
            },
        )
        logger.debug("Created post with id=%s for userId=%s", post.id, user_id)

        view: PostView | None = await self.posts.get_view(db, post.id)
        return to_post_dto(view)

    async def get_posts_by_user(
        self,
        db: AsyncSession,
        user_id: int,
        page: int = 1,
        per_page: int = 20,
    ) -> Page[PostDTO]:
        """사용자가 작성한 게시글을 페이지 단위로 조회합니다.

        Retrieve one page of posts authored by a user.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        if not await self.users.exists(db, {"id": user_id}):
            raise NotFoundError(f"User not found with id: {user_id}")

        views, total = await self.posts.get_views_by_user(db, user_id, page, per_page)
        return Page.build([to_post_dto(v) for v in views], total, page, per_page)

    def build_filter(self, keyword: str | None, category: str | None) -> Specification:
        """검색 입력으로 게시글 조건을 조합합니다 (Compose the post search predicate)."""
        return title_contains(keyword).and_(has_category(category))

    async def search_posts(
        self,
        db: AsyncSession,
        keyword: str | None = None,
        category: str | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> Page[PostDTO]:
        """제목 키워드와 카테고리 이름으로 게시글을 검색합니다.

        Search posts by title keyword (case-insensitive substring) and
        category name (exact). Either filter may be omitted.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            keyword: 제목 키워드 (Title keyword, optional)
            category: 카테고리 이름 (Category name, optional)
            page: 페이지 번호 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            Page[PostDTO]: 검색 결과 페이지 (Page of matching posts)
        """
        spec: Specification = self.build_filter(keyword, category)
        views, total = await self.posts.find_views(db, spec, page, per_page)
        return Page.build([to_post_dto(v) for v in views], total, page, per_page)

    async def get_post_detail(self, db: AsyncSession, post_id: int) -> PostDetailDTO:
        """게시글 상세(작성자, 카테고리, 댓글)를 조회합니다.

        Retrieve a post with author, category and comments.

        Raises:
            NotFoundError: 게시글을 찾을 수 없을 때 (Post not found)
        """
        post: Post | None = await self.posts.get_with_user_and_comments(db, post_id)
        if post is None:
            raise NotFoundError(f"Post not found with id: {post_id}")
        return to_post_detail_dto(post)


# 싱글턴 인스턴스 — Singleton instance
post_service: PostService = PostService()
