"""게시글 API 테스트 — 조건 검색, 상세 조회.

Post API tests — Filtered search and post detail.
"""

from httpx import AsyncClient

from app.models.comment import Comment

POSTS = "/api/v1/posts"


# ===== 게시글 검색 =====

class TestPostSearch:
    """게시글 검색 테스트."""

    async def test_search_by_keyword(self, client: AsyncClient, posts):
        """키워드만으로 검색 (대소문자 무시)."""
        res = await client.get(f"{POSTS}/search", params={"keyword": "java"})
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 2
        assert [p["title"] for p in data["items"]] == ["Learn Java Loops", "Advanced Java Streams"]

    async def test_search_by_keyword_and_category(self, client: AsyncClient, posts, categories):
        """키워드와 카테고리 모두로 검색."""
        res = await client.get(f"{POSTS}/search", params={"keyword": "Loops", "category": "Java"})
        assert res.status_code == 200
        items = res.json()["items"]
        assert len(items) == 1
        assert items[0] == {
            "id": posts["Learn Java Loops"].id,
            "title": "Learn Java Loops",
            "content": "Content",
            "category_id": categories["Java"].id,
            "category_name": "Java",
        }

    async def test_search_by_category(self, client: AsyncClient, posts):
        """카테고리만으로 검색."""
        res = await client.get(f"{POSTS}/search", params={"category": "Python"})
        assert [p["title"] for p in res.json()["items"]] == ["Python Basics"]

    async def test_search_without_filters(self, client: AsyncClient, posts, uncategorized_post):
        """필터가 없으면 전체 게시글."""
        res = await client.get(f"{POSTS}/search")
        assert res.json()["total"] == 4

    async def test_search_empty_filters(self, client: AsyncClient, posts):
        """빈 문자열 필터는 무시."""
        res = await client.get(f"{POSTS}/search", params={"keyword": "", "category": ""})
        assert res.json()["total"] == 3

    async def test_search_category_case_sensitive(self, client: AsyncClient, posts):
        """카테고리 이름은 대소문자 구분."""
        res = await client.get(f"{POSTS}/search", params={"category": "python"})
        assert res.json()["total"] == 0

    async def test_search_paginates(self, client: AsyncClient, posts):
        """검색 결과 페이지 단위 조회."""
        res = await client.get(f"{POSTS}/search", params={"page": 2, "per_page": 2})
        data = res.json()
        assert data["total"] == 3
        assert data["pages"] == 2
        assert [p["title"] for p in data["items"]] == ["Python Basics"]

    async def test_search_per_page_too_large(self, client: AsyncClient):
        """per_page 최대값 초과는 400."""
        res = await client.get(f"{POSTS}/search", params={"per_page": 1000})
        assert res.status_code == 400


# ===== 게시글 상세 =====

class TestPostDetail:
    """게시글 상세 조회 테스트."""

    async def test_get_post_detail(self, client: AsyncClient, db, user, posts):
        """작성자, 카테고리, 댓글(최신순) 포함."""
        post = posts["Learn Java Loops"]
        db.add_all([
            Comment(text="First", user_id=user.id, post_id=post.id),
            Comment(text="Second", user_id=user.id, post_id=post.id),
        ])
        await db.flush()

        res = await client.get(f"{POSTS}/{post.id}")
        assert res.status_code == 200
        data = res.json()
        assert data["title"] == "Learn Java Loops"
        assert data["category_name"] == "Java"
        assert data["user_id"] == user.id
        assert data["user_name"] == "John Doe"
        assert [c["text"] for c in data["comments"]] == ["Second", "First"]
        assert data["comments"][0]["user_name"] == "John Doe"

    async def test_get_post_detail_without_category(self, client: AsyncClient, uncategorized_post):
        """카테고리 없는 게시글 상세."""
        res = await client.get(f"{POSTS}/{uncategorized_post.id}")
        assert res.status_code == 200
        assert res.json()["category_id"] is None
        assert res.json()["comments"] == []

    async def test_get_post_detail_not_found(self, client: AsyncClient):
        """존재하지 않는 게시글은 404."""
        res = await client.get(f"{POSTS}/9999")
        assert res.status_code == 404
        assert res.json()["error"] == "NOT_FOUND"
