"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
A user is an independent root entity that authors posts, comments and likes.

Tables:
    - users: 사용자 계정 (User accounts, unique email)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class User(Base):
    """사용자 모델 — 게시글 작성자.

    User model — Author of posts, comments and likes.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 이름 (Display name)
        email: 이메일 (Email address, globally unique)

    Relationships:
        posts: 작성한 게시글 목록 (Authored posts, cascade delete)
        comments: 작성한 댓글 목록 (Authored comments, cascade delete)
        likes: 좋아요 목록 (Post likes, cascade delete)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 이름 — Display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — Email address (전역 고유, globally unique)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    # 관계 — Relationships (cascade: 사용자 삭제 시 작성 데이터 일괄 삭제)
    posts = relationship("Post", back_populates="user", cascade="all, delete-orphan", order_by="Post.id")
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")
    likes = relationship("PostLike", back_populates="user", cascade="all, delete-orphan")
