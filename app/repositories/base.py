"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Delete operations and interprets
``Specification`` predicates into SQLAlchemy boolean clauses.

Every method takes the session explicitly; the session is the read scope.

Usage:
    class CategoryRepository(BaseRepository[Category]):
        def __init__(self) -> None:
            super().__init__(Category)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select, and_, func, or_, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.repositories.specifications import (
    Always,
    And,
    FieldContains,
    FieldEquals,
    Or,
    Specification,
)

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    # ------------------------------------------------------------------
    # 조건 해석 — Specification interpretation
    # ------------------------------------------------------------------

    def to_clause(self, spec: Specification) -> ColumnElement[bool]:
        """Specification을 SQLAlchemy WHERE 절로 변환합니다.

        Translate a predicate tree into a boolean clause over ``self.model``.
        Unknown field names raise ``AttributeError`` unchanged.

        Args:
            spec: 변환할 조건 (Predicate to translate)

        Returns:
            ColumnElement[bool]: WHERE 절 (Boolean SQL expression)
        """
        if isinstance(spec, Always):
            return true()
        if isinstance(spec, And):
            return and_(self.to_clause(spec.left), self.to_clause(spec.right))
        if isinstance(spec, Or):
            return or_(self.to_clause(spec.left), self.to_clause(spec.right))
        if isinstance(spec, FieldContains):
            def contains(column: Any) -> ColumnElement[bool]:
                if spec.case_insensitive:
                    return func.lower(column).contains(spec.value.lower(), autoescape=True)
                return column.contains(spec.value, autoescape=True)
            return self._on_path(spec.path, contains)
        if isinstance(spec, FieldEquals):
            return self._on_path(spec.path, lambda column: column == spec.value)
        raise TypeError(f"Unsupported specification: {type(spec).__name__}")

    def _on_path(self, path: str, build: Any) -> ColumnElement[bool]:
        """필드 경로에 조건을 적용합니다.

        Apply ``build`` to the column named by ``path``. A dotted path crosses
        one relationship via EXISTS (``has`` / ``any``), so rows whose
        relationship is NULL never match.
        """
        head, _, tail = path.partition(".")
        attr = getattr(self.model, head)
        if not tail:
            return build(attr)
        target = attr.property.mapper.class_
        condition = build(getattr(target, tail))
        if attr.property.uselist:
            return attr.any(condition)
        return attr.has(condition)

    async def find_all(
        self,
        db: AsyncSession,
        spec: Specification,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 엔티티를 조회합니다.

        Retrieve every entity matching the predicate.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            spec: 검색 조건 (Predicate to evaluate)
            order_by: 정렬 기준 컬럼, 기본값은 ID (Order column, defaults to id)

        Returns:
            Sequence[ModelType]: 매칭된 엔티티 목록 (Matching entities)
        """
        query: Select = (
            select(self.model)
            .where(self.to_clause(spec))
            .order_by(order_by if order_by is not None else self.model.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession, spec: Specification) -> int:
        """조건에 맞는 레코드 수를 반환합니다 (Count records matching the predicate)."""
        query: Select = select(func.count()).select_from(self.model).where(self.to_clause(spec))
        return (await db.execute(query)).scalar() or 0

    # ------------------------------------------------------------------
    # 기본 CRUD — Generic CRUD
    # ------------------------------------------------------------------

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its identifier.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Identifier of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given equality filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Additional filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        query = query.order_by(order_by if order_by is not None else self.model.id)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its identifier.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드의 ID (Identifier of the record to delete)

        Returns:
            bool: 삭제 성공 여부 (Whether the deletion was successful)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
