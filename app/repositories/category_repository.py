"""카테고리 레포지토리 — 카테고리 CRUD 및 이름 조회.

Category Repository — CRUD and lookup-by-name for categories.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Category
from app.repositories.base import BaseRepository
from app.repositories.projections import CategorySummary


class CategoryRepository(BaseRepository[Category]):
    """카테고리 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the categories table.
    """

    def __init__(self) -> None:
        super().__init__(Category)

    async def find_summary_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> CategorySummary | None:
        """이름으로 카테고리 요약을 조회합니다.

        Retrieve the id/name projection of the category called ``name``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 카테고리 이름, 대소문자 구분 (Exact, case-sensitive name)

        Returns:
            CategorySummary | None: 카테고리 요약 또는 None (Summary or None)
        """
        query: Select = select(Category.id, Category.name).where(Category.name == name)
        row = (await db.execute(query)).one_or_none()
        if row is None:
            return None
        return CategorySummary(id=row.id, name=row.name)


# 싱글턴 인스턴스 — Singleton instance
category_repository: CategoryRepository = CategoryRepository()
