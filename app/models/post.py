"""게시글 및 카테고리 SQLAlchemy ORM 모델 정의.

Post and Category SQLAlchemy ORM model definitions.
A post belongs to exactly one user and optionally to one category.

Tables:
    - categories: 카테고리 (Post categories, unique name)
    - posts: 게시글 (Posts with nullable category reference)
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Category(Base):
    """카테고리 모델 — 게시글 분류.

    Category model — Independent root entity used to classify posts.
    Its collection of posts is derived from ``posts.category_id`` and is not owned.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 카테고리 이름 (Unique category name)
        description: 설명 (Optional description)
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 카테고리 이름 — Unique, exact-match filter target
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    posts = relationship("Post", back_populates="category")


class Post(Base):
    """게시글 모델 — 사용자가 작성한 글.

    Post model — Authored by a user, optionally filed under a category.
    ``category`` is lazy-loaded: read it only while the loading session is open.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        title: 제목 (Non-blank title)
        content: 본문 (Non-blank body text)
        user_id: 작성자 FK (Owning user foreign key)
        category_id: 카테고리 FK (Category foreign key, nullable)

    Relationships:
        user: 작성자 (Owning user)
        category: 카테고리 (Associated category, may be None)
        comments: 댓글 목록 (Comments, cascade delete)
        likes: 좋아요 목록 (Likes, cascade delete)
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # 작성자 FK — Owning user (CASCADE: 사용자 삭제 시 게시글도 삭제)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # 카테고리 FK — Optional category (SET NULL on category delete)
    category_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    user = relationship("User", back_populates="posts")
    category = relationship("Category", back_populates="posts")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")
    likes = relationship("PostLike", back_populates="post", cascade="all, delete-orphan")
