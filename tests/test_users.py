"""사용자 API 테스트 — 생성, 조회, 요약, 삭제, 사용자별 게시글.

User API tests — Create, read, summaries, delete and per-user posts.
"""

from httpx import AsyncClient

USERS = "/api/v1/users"


# ===== 사용자 생성 =====

class TestUserCreate:
    """사용자 생성 테스트."""

    async def test_create_user(self, client: AsyncClient):
        """사용자 생성 성공 — 빈 게시글 목록 포함."""
        res = await client.post(USERS, json={"name": "John Doe", "email": "john@example.com"})
        assert res.status_code == 201
        data = res.json()
        assert data["id"] > 0
        assert data["name"] == "John Doe"
        assert data["email"] == "john@example.com"
        assert data["posts"] == []

    async def test_create_user_duplicate_email(self, client: AsyncClient, user):
        """중복 이메일은 409."""
        res = await client.post(USERS, json={"name": "Other", "email": user.email})
        assert res.status_code == 409
        assert res.json()["error"] == "CONFLICT"

    async def test_create_user_invalid_email(self, client: AsyncClient):
        """잘못된 이메일 형식은 400."""
        res = await client.post(USERS, json={"name": "John", "email": "not-an-email"})
        assert res.status_code == 400
        assert "email" in res.json()["message"]

    async def test_create_user_blank_name(self, client: AsyncClient):
        """공백 이름은 400."""
        res = await client.post(USERS, json={"name": "   ", "email": "a@example.com"})
        assert res.status_code == 400
        assert "name" in res.json()["message"]


# ===== 사용자 조회 =====

class TestUserRead:
    """사용자 조회 테스트."""

    async def test_list_users_with_posts(self, client: AsyncClient, posts):
        """사용자 목록은 게시글을 포함."""
        res = await client.get(USERS)
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert [p["title"] for p in data[0]["posts"]] == [
            "Learn Java Loops",
            "Advanced Java Streams",
            "Python Basics",
        ]
        assert data[0]["posts"][0]["category_name"] == "Java"

    async def test_get_user(self, client: AsyncClient, user, uncategorized_post):
        """단일 사용자 조회 — 카테고리 없는 게시글은 null."""
        res = await client.get(f"{USERS}/{user.id}")
        assert res.status_code == 200
        posts = res.json()["posts"]
        assert len(posts) == 1
        assert posts[0]["category_id"] is None
        assert posts[0]["category_name"] is None

    async def test_get_user_not_found(self, client: AsyncClient):
        """존재하지 않는 사용자는 404."""
        res = await client.get(f"{USERS}/9999")
        assert res.status_code == 404
        assert res.json()["message"] == "User not found with id: 9999"

    async def test_list_summaries(self, client: AsyncClient, user):
        """사용자 요약은 id, name, email만."""
        res = await client.get(f"{USERS}/summaries")
        assert res.status_code == 200
        assert res.json() == [{"id": user.id, "name": "John Doe", "email": "john@example.com"}]


# ===== 사용자 삭제 =====

class TestUserDelete:
    """사용자 삭제 테스트."""

    async def test_delete_user_cascades_posts(self, client: AsyncClient, user, posts):
        """사용자 삭제 시 게시글도 삭제."""
        res = await client.delete(f"{USERS}/{user.id}")
        assert res.status_code == 204

        assert (await client.get(f"{USERS}/{user.id}")).status_code == 404
        search = await client.get("/api/v1/posts/search")
        assert search.json()["total"] == 0

    async def test_delete_user_not_found(self, client: AsyncClient):
        """존재하지 않는 사용자 삭제는 404."""
        res = await client.delete(f"{USERS}/9999")
        assert res.status_code == 404


# ===== 사용자별 게시글 =====

class TestUserPosts:
    """사용자 게시글 작성/조회 테스트."""

    async def test_create_post_with_category(self, client: AsyncClient, user, categories):
        """카테고리 지정 게시글 작성."""
        res = await client.post(f"{USERS}/{user.id}/posts", json={
            "title": "Generics",
            "content": "Type parameters",
            "category_id": categories["Java"].id,
        })
        assert res.status_code == 201
        data = res.json()
        assert data["title"] == "Generics"
        assert data["category_id"] == categories["Java"].id
        assert data["category_name"] == "Java"

    async def test_create_post_without_category(self, client: AsyncClient, user):
        """카테고리 없는 게시글 작성."""
        res = await client.post(f"{USERS}/{user.id}/posts", json={
            "title": "Notes",
            "content": "Anything",
        })
        assert res.status_code == 201
        assert res.json()["category_id"] is None
        assert res.json()["category_name"] is None

    async def test_create_post_unknown_user(self, client: AsyncClient):
        """존재하지 않는 사용자는 404."""
        res = await client.post(f"{USERS}/9999/posts", json={"title": "T", "content": "C"})
        assert res.status_code == 404

    async def test_create_post_unknown_category(self, client: AsyncClient, user):
        """존재하지 않는 카테고리는 404."""
        res = await client.post(f"{USERS}/{user.id}/posts", json={
            "title": "T",
            "content": "C",
            "category_id": 9999,
        })
        assert res.status_code == 404
        assert res.json()["message"] == "Category not found with id: 9999"

    async def test_create_post_blank_title(self, client: AsyncClient, user):
        """공백 제목은 400."""
        res = await client.post(f"{USERS}/{user.id}/posts", json={"title": " ", "content": "C"})
        assert res.status_code == 400
        assert "title" in res.json()["message"]

    async def test_list_user_posts_paginated(self, client: AsyncClient, user, posts):
        """사용자 게시글 페이지 조회."""
        res = await client.get(f"{USERS}/{user.id}/posts", params={"page": 1, "per_page": 2})
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 3
        assert data["page"] == 1
        assert data["per_page"] == 2
        assert data["pages"] == 2
        assert [p["title"] for p in data["items"]] == ["Learn Java Loops", "Advanced Java Streams"]

    async def test_list_user_posts_unknown_user(self, client: AsyncClient):
        """존재하지 않는 사용자는 404."""
        res = await client.get(f"{USERS}/9999/posts")
        assert res.status_code == 404

    async def test_list_user_posts_invalid_page(self, client: AsyncClient, user):
        """page는 1 이상."""
        res = await client.get(f"{USERS}/{user.id}/posts", params={"page": 0})
        assert res.status_code == 400
        assert "page" in res.json()["message"]
