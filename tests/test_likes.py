"""좋아요 및 활동 리포트 API 테스트.

Like API tests — Like, unlike, count and the most-active-users report.
"""

from httpx import AsyncClient

from app.models.comment import Comment, PostLike
from app.models.user import User

LIKES = "/api/v1/likes"
REPORTS = "/api/v1/reports"


class TestLike:
    """좋아요 테스트."""

    async def test_like_post(self, client: AsyncClient, user, posts):
        """좋아요 후 좋아요 수 1."""
        post = posts["Python Basics"]
        res = await client.post(LIKES, json={"user_id": user.id, "post_id": post.id})
        assert res.status_code == 201

        count = await client.get(f"{LIKES}/post/{post.id}/count")
        assert count.status_code == 200
        assert count.json() == 1

    async def test_like_twice_conflicts(self, client: AsyncClient, user, posts):
        """같은 게시글 중복 좋아요는 409."""
        post = posts["Python Basics"]
        await client.post(LIKES, json={"user_id": user.id, "post_id": post.id})
        res = await client.post(LIKES, json={"user_id": user.id, "post_id": post.id})
        assert res.status_code == 409
        assert res.json()["message"] == "User already liked this post"

    async def test_like_unknown_post(self, client: AsyncClient, user):
        """존재하지 않는 게시글은 404."""
        res = await client.post(LIKES, json={"user_id": user.id, "post_id": 9999})
        assert res.status_code == 404

    async def test_like_unknown_user(self, client: AsyncClient, posts):
        """존재하지 않는 사용자는 404."""
        res = await client.post(LIKES, json={"user_id": 9999, "post_id": posts["Python Basics"].id})
        assert res.status_code == 404


class TestUnlike:
    """좋아요 취소 테스트."""

    async def test_unlike_post(self, client: AsyncClient, user, posts):
        """좋아요 취소 후 좋아요 수 0."""
        post = posts["Python Basics"]
        await client.post(LIKES, json={"user_id": user.id, "post_id": post.id})

        res = await client.delete(f"{LIKES}/post/{post.id}/user/{user.id}")
        assert res.status_code == 204
        assert (await client.get(f"{LIKES}/post/{post.id}/count")).json() == 0

    async def test_unlike_without_like_is_noop(self, client: AsyncClient, user, posts):
        """없는 좋아요 취소도 204."""
        res = await client.delete(f"{LIKES}/post/{posts['Python Basics'].id}/user/{user.id}")
        assert res.status_code == 204

    async def test_count_for_unknown_post(self, client: AsyncClient):
        """좋아요 없는 게시글 수는 0."""
        res = await client.get(f"{LIKES}/post/9999/count")
        assert res.json() == 0


class TestActiveUsersReport:
    """활동 사용자 리포트 테스트."""

    async def test_top_active_users(self, client: AsyncClient, db, user, posts):
        """댓글 수 + 좋아요 수 내림차순."""
        quiet = User(name="Quiet", email="quiet@example.com")
        db.add(quiet)
        await db.flush()

        loops, basics = posts["Learn Java Loops"], posts["Python Basics"]
        db.add_all([
            Comment(text="a", user_id=user.id, post_id=loops.id),
            Comment(text="b", user_id=user.id, post_id=basics.id),
            PostLike(user_id=user.id, post_id=loops.id),
            PostLike(user_id=quiet.id, post_id=basics.id),
        ])
        await db.flush()

        res = await client.get(f"{REPORTS}/active-users")
        assert res.status_code == 200
        assert res.json() == [
            {"user_id": user.id, "user_name": "John Doe", "activity_count": 3},
            {"user_id": quiet.id, "user_name": "Quiet", "activity_count": 1},
        ]

    async def test_inactive_users_have_zero(self, client: AsyncClient, user):
        """활동 없는 사용자는 0."""
        res = await client.get(f"{REPORTS}/active-users")
        assert res.json() == [{"user_id": user.id, "user_name": "John Doe", "activity_count": 0}]

    async def test_report_is_limited(self, client: AsyncClient, db):
        """상위 5명까지만."""
        db.add_all([User(name=f"User {i}", email=f"user{i}@example.com") for i in range(7)])
        await db.flush()

        res = await client.get(f"{REPORTS}/active-users")
        assert len(res.json()) == 5
