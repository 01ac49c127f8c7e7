"""댓글 및 좋아요 SQLAlchemy ORM 모델 정의.

Comment and PostLike SQLAlchemy ORM model definitions.

Tables:
    - comments: 댓글 (Comments on posts)
    - post_likes: 좋아요 (One like per user per post)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Comment(Base):
    """댓글 모델 — 게시글에 달린 사용자 댓글.

    Comment model — A user's comment on a post.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        text: 댓글 내용 (Comment text)
        created_at: 작성 일시 UTC (Creation timestamp)
        user_id: 작성자 FK (Author foreign key)
        post_id: 게시글 FK (Post foreign key)
    """

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(String(255), nullable=False)
    # 작성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)

    user = relationship("User", back_populates="comments")
    post = relationship("Post", back_populates="comments")


class PostLike(Base):
    """좋아요 모델 — 사용자별 게시글 좋아요.

    PostLike model — A user's like on a post.

    Constraints:
        uk_post_likes_user_post: 사용자+게시글 중복 방지 (One like per user per post)
    """

    __tablename__ = "post_likes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uk_post_likes_user_post"),
    )

    user = relationship("User", back_populates="likes")
    post = relationship("Post", back_populates="likes")
