"""댓글 API 테스트 — 작성 및 게시글별 조회.

Comment API tests — Add and list comments.
"""

from httpx import AsyncClient

COMMENTS = "/api/v1/comments"


class TestCommentCreate:
    """댓글 작성 테스트."""

    async def test_add_comment(self, client: AsyncClient, user, posts):
        """댓글 작성 성공 — 작성자 정보 포함."""
        post = posts["Python Basics"]
        res = await client.post(COMMENTS, json={
            "text": "Nice intro",
            "user_id": user.id,
            "post_id": post.id,
        })
        assert res.status_code == 201
        data = res.json()
        assert data["text"] == "Nice intro"
        assert data["user_id"] == user.id
        assert data["user_name"] == "John Doe"
        assert data["post_id"] == post.id
        assert data["created_at"]

    async def test_add_comment_unknown_user(self, client: AsyncClient, posts):
        """존재하지 않는 사용자는 404."""
        post = posts["Python Basics"]
        res = await client.post(COMMENTS, json={"text": "Hi", "user_id": 9999, "post_id": post.id})
        assert res.status_code == 404
        assert res.json()["message"] == "User not found"

    async def test_add_comment_unknown_post(self, client: AsyncClient, user):
        """존재하지 않는 게시글은 404."""
        res = await client.post(COMMENTS, json={"text": "Hi", "user_id": user.id, "post_id": 9999})
        assert res.status_code == 404
        assert res.json()["message"] == "Post not found"

    async def test_add_comment_blank_text(self, client: AsyncClient, user, posts):
        """공백 댓글은 400."""
        post = posts["Python Basics"]
        res = await client.post(COMMENTS, json={"text": "  ", "user_id": user.id, "post_id": post.id})
        assert res.status_code == 400
        assert "text" in res.json()["message"]


class TestCommentRead:
    """게시글별 댓글 조회 테스트."""

    async def test_comments_newest_first(self, client: AsyncClient, user, posts):
        """댓글은 최신순."""
        post = posts["Learn Java Loops"]
        for text in ("one", "two", "three"):
            res = await client.post(COMMENTS, json={"text": text, "user_id": user.id, "post_id": post.id})
            assert res.status_code == 201

        res = await client.get(f"{COMMENTS}/post/{post.id}")
        assert res.status_code == 200
        assert [c["text"] for c in res.json()] == ["three", "two", "one"]

    async def test_comments_for_post_without_comments(self, client: AsyncClient, posts):
        """댓글 없는 게시글은 빈 목록."""
        res = await client.get(f"{COMMENTS}/post/{posts['Python Basics'].id}")
        assert res.json() == []
