"""게시글 레포지토리 — 게시글 CRUD, 조건 검색, 프로젝션 쿼리.

Post Repository — CRUD, specification search and projection queries for posts.
View queries select only the columns ``PostView`` exposes, outer-joining the
category so the nested summary is fetched in the same statement.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, joinedload, selectinload

from app.models.comment import Comment
from app.models.post import Category, Post
from app.repositories.base import BaseRepository
from app.repositories.projections import PostView
from app.repositories.specifications import Specification
from app.utils.pagination import paginate


class PostRepository(BaseRepository[Post]):
    """게시글 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the posts table.
    """

    def __init__(self) -> None:
        super().__init__(Post)

    def view_query(self) -> Select:
        """PostView 컬럼만 선택하는 기본 쿼리를 생성합니다.

        Build the base column-selection query behind ``PostView``:
        post id/title/content plus the category id/name via LEFT OUTER JOIN.
        The category table is aliased so predicate subqueries stay independent.

        Returns:
            Select: 프로젝션 쿼리 (Projection query, ordered by post id)
        """
        category = aliased(Category)
        return (
            select(
                Post.id.label("post_id"),
                Post.title,
                Post.content,
                category.id.label("category_id"),
                category.name.label("category_name"),
            )
            .outerjoin(category, Post.category_id == category.id)
            .order_by(Post.id)
        )

    async def get_view(self, db: AsyncSession, post_id: int) -> PostView | None:
        """ID로 게시글 뷰를 조회합니다 (Single post view by id)."""
        row = (await db.execute(self.view_query().where(Post.id == post_id))).one_or_none()
        return PostView.from_row(row) if row is not None else None

    async def find_views(
        self,
        db: AsyncSession,
        spec: Specification,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[PostView], int]:
        """조건에 맞는 게시글 뷰를 페이지 단위로 조회합니다.

        Evaluate ``spec`` and return one page of matching post views.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            spec: 검색 조건 (Predicate over posts)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            tuple[list[PostView], int]: (뷰 목록, 전체 개수) (Views and total count)
        """
        query: Select = self.view_query().where(self.to_clause(spec))
        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [PostView.from_row(row) for row in rows], total

    async def get_views_by_user(
        self,
        db: AsyncSession,
        user_id: int,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[PostView], int]:
        """사용자가 작성한 게시글 뷰를 페이지 단위로 조회합니다.

        Retrieve one page of post views authored by ``user_id``.
        """
        query: Select = self.view_query().where(Post.user_id == user_id)
        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [PostView.from_row(row) for row in rows], total

    async def get_views_by_category(
        self,
        db: AsyncSession,
        category_id: int,
    ) -> list[PostView]:
        """카테고리에 속한 모든 게시글 뷰를 조회합니다 (All post views in a category)."""
        query: Select = self.view_query().where(Post.category_id == category_id)
        result = await db.execute(query)
        return [PostView.from_row(row) for row in result.all()]

    async def get_with_user_and_comments(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> Post | None:
        """게시글을 작성자, 카테고리, 댓글(댓글 작성자 포함)과 함께 조회합니다.

        Retrieve a post with its entity graph loaded: user and category in the
        same statement, comments (each with its author) in a follow-up SELECT IN.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post identifier)

        Returns:
            Post | None: 관계가 로드된 게시글 또는 None (Post with graph loaded, or None)
        """
        query: Select = (
            select(Post)
            .options(
                joinedload(Post.user),
                joinedload(Post.category),
                selectinload(Post.comments).joinedload(Comment.user),
            )
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.unique().scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
post_repository: PostRepository = PostRepository()
