"""카테고리 API 테스트 — 생성, 목록, 카테고리별 게시글.

Category API tests — Create, list and posts per category.
"""

from httpx import AsyncClient

CATEGORIES = "/api/v1/categories"


class TestCategoryCreate:
    """카테고리 생성 테스트."""

    async def test_create_category(self, client: AsyncClient):
        """카테고리 생성 성공."""
        res = await client.post(CATEGORIES, json={"name": "Go", "description": "Gophers"})
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Go"
        assert data["description"] == "Gophers"

    async def test_create_category_without_description(self, client: AsyncClient):
        """설명 없이 생성."""
        res = await client.post(CATEGORIES, json={"name": "Rust"})
        assert res.status_code == 201
        assert res.json()["description"] is None

    async def test_create_category_duplicate_name(self, client: AsyncClient, categories):
        """중복 이름은 409."""
        res = await client.post(CATEGORIES, json={"name": "Java"})
        assert res.status_code == 409

    async def test_create_category_blank_name(self, client: AsyncClient):
        """공백 이름은 400."""
        res = await client.post(CATEGORIES, json={"name": ""})
        assert res.status_code == 400


class TestCategoryRead:
    """카테고리 조회 테스트."""

    async def test_list_categories(self, client: AsyncClient, categories):
        """카테고리 목록."""
        res = await client.get(CATEGORIES)
        assert res.status_code == 200
        assert [c["name"] for c in res.json()] == ["Java", "Python"]

    async def test_posts_by_category(self, client: AsyncClient, posts, categories):
        """카테고리별 게시글."""
        res = await client.get(f"{CATEGORIES}/{categories['Java'].id}/posts")
        assert res.status_code == 200
        data = res.json()
        assert [p["title"] for p in data] == ["Learn Java Loops", "Advanced Java Streams"]
        assert all(p["category_name"] == "Java" for p in data)

    async def test_posts_by_empty_category(self, client: AsyncClient, categories):
        """게시글 없는 카테고리는 빈 목록."""
        res = await client.get(f"{CATEGORIES}/{categories['Python'].id}/posts")
        assert res.json() == []

    async def test_posts_by_unknown_category(self, client: AsyncClient):
        """존재하지 않는 카테고리는 404."""
        res = await client.get(f"{CATEGORIES}/9999/posts")
        assert res.status_code == 404
        assert res.json()["message"] == "Category not found with id 9999"
