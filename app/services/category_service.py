"""카테고리 서비스 — 카테고리 CRUD 및 카테고리별 게시글 조회.

Category Service — Business logic for categories and their posts.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Category
from app.repositories.category_repository import CategoryRepository, category_repository
from app.repositories.post_repository import PostRepository, post_repository
from app.repositories.projections import CategorySummary
from app.schemas.category import CategoryCreate, CategoryDTO
from app.schemas.post import PostDTO
from app.services.mappers import to_category_dto, to_post_dto
from app.utils.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class CategoryService:
    """카테고리 관련 비즈니스 로직을 처리하는 서비스.

    Service handling category business logic.
    """

    def __init__(
        self,
        categories: CategoryRepository = category_repository,
        posts: PostRepository = post_repository,
    ) -> None:
        self.categories: CategoryRepository = categories
        self.posts: PostRepository = posts

    async def create_category(self, db: AsyncSession, data: CategoryCreate) -> CategoryDTO:
        """새 카테고리를 생성합니다.

        Create a new category.

        Raises:
            DuplicateError: 같은 이름의 카테고리가 이미 존재할 때 (Name already taken)
        """
        existing: CategorySummary | None = await self.categories.find_summary_by_name(db, data.name)
        if existing is not None:
            logger.debug("Category name %r already used by id=%s", data.name, existing.id)
            raise DuplicateError("A category with this name already exists")

        category: Category = await self.categories.create(
            db, {"name": data.name, "description": data.description}
        )
        logger.debug("Created category with id=%s", category.id)
        return to_category_dto(category)

    async def list_categories(self, db: AsyncSession) -> list[CategoryDTO]:
        return [to_category_dto(c) for c in await self.categories.get_all(db)]

    async def get_posts_by_category(self, db: AsyncSession, category_id: int) -> list[PostDTO]:
        """카테고리에 속한 게시글을 조회합니다.

        Retrieve every post filed under a category.

        Raises:
            NotFoundError: 카테고리를 찾을 수 없을 때 (Category not found)
        """
        if not await self.categories.exists(db, {"id": category_id}):
            raise NotFoundError(f"Category not found with id {category_id}")
        views = await self.posts.get_views_by_category(db, category_id)
        return [to_post_dto(v) for v in views]


# 싱글턴 인스턴스 — Singleton instance
category_service: CategoryService = CategoryService()
