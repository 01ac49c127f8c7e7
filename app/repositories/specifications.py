"""게시글 검색 조건(Specification) 모듈 — 조합 가능한 조건 값.

Composable query predicates for post searches.

Predicates are immutable tagged values (``Always``, ``FieldContains``,
``FieldEquals``, ``And``, ``Or``). They carry no storage logic: the record
store translates them into its native query form (see
``BaseRepository.to_clause``).

Usage:
    spec = title_contains("Loops").and_(has_category("Java"))
    posts = await post_repository.find_views(db, spec)
"""

from dataclasses import dataclass


class Specification:
    """조합 가능한 조건의 공통 베이스.

    Base for all predicate variants. Provides the ``and_``/``or_`` combinators
    and their ``&``/``|`` operator forms.
    """

    def and_(self, other: "Specification") -> "Specification":
        """두 조건을 모두 만족하는 레코드만 매칭하는 새 조건을 반환합니다.

        Return a predicate matching records that satisfy both operands.
        ``Always`` is the identity element and is folded away.
        """
        if isinstance(other, Always):
            return self
        if isinstance(self, Always):
            return other
        return And(self, other)

    def or_(self, other: "Specification") -> "Specification":
        """둘 중 하나라도 만족하면 매칭하는 새 조건을 반환합니다.

        Return a predicate matching records that satisfy either operand.
        ``Always`` absorbs the other operand.
        """
        if isinstance(self, Always) or isinstance(other, Always):
            return Always()
        return Or(self, other)

    def __and__(self, other: "Specification") -> "Specification":
        return self.and_(other)

    def __or__(self, other: "Specification") -> "Specification":
        return self.or_(other)


@dataclass(frozen=True)
class Always(Specification):
    """항상 참인 조건 — AND 연산의 항등원 (Matches every record)."""


@dataclass(frozen=True)
class FieldContains(Specification):
    """필드 부분 문자열 조건.

    Matches when the field at ``path`` contains ``value`` as a literal substring.

    Attributes:
        path: 필드 경로, 관계는 점 표기 (Field path, dotted for one relationship hop)
        value: 검색 문자열 (Substring to look for)
        case_insensitive: 대소문자 무시 여부 (Compare lower-cased values)
    """

    path: str
    value: str
    case_insensitive: bool = True


@dataclass(frozen=True)
class FieldEquals(Specification):
    """필드 일치 조건 (Exact, case-sensitive equality on ``path``)."""

    path: str
    value: object


@dataclass(frozen=True)
class And(Specification):
    left: Specification
    right: Specification


@dataclass(frozen=True)
class Or(Specification):
    left: Specification
    right: Specification


def title_contains(keyword: str | None) -> Specification:
    """제목에 키워드가 포함된 게시글 조건.

    Match posts whose title contains ``keyword``, ignoring case.
    ``None`` or ``""`` yields ``Always()`` so optional input never hides rows.
    Whitespace-only keywords are real filters.

    Args:
        keyword: 검색 키워드 (Keyword, optional)

    Returns:
        Specification: 제목 포함 조건 (Title containment predicate)
    """
    if keyword is None or keyword == "":
        return Always()
    return FieldContains("title", keyword, case_insensitive=True)


def has_category(category_name: str | None) -> Specification:
    """카테고리 이름이 정확히 일치하는 게시글 조건.

    Match posts whose category name equals ``category_name`` exactly
    (case-sensitive). ``None`` or ``""`` yields ``Always()``.
    Posts without a category never match a non-empty name.

    Args:
        category_name: 카테고리 이름 (Category name, optional)

    Returns:
        Specification: 카테고리 일치 조건 (Category equality predicate)
    """
    if category_name is None or category_name == "":
        return Always()
    return FieldEquals("category.name", category_name)
