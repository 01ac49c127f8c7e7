"""프로젝션 매퍼 — 읽기 뷰/엔티티를 평면 DTO로 변환.

Projection mapper — Turns store-produced views and loaded entities into the
flat DTOs exposed at the HTTP boundary.

Every function is pure and must run exactly once per record while the
session that loaded the input is still open: reading an unloaded lazy
relationship after the session closed raises SQLAlchemy's
``DetachedInstanceError``, which is not caught here.
"""

from collections.abc import Iterable

from app.models.comment import Comment
from app.models.post import Category, Post
from app.models.user import User
from app.repositories.projections import CommentView, PostView, UserActivityReport, UserSummary
from app.schemas.category import CategoryDTO
from app.schemas.comment import CommentDTO
from app.schemas.post import PostCommentDTO, PostDetailDTO, PostDTO
from app.schemas.report import UserActivityDTO
from app.schemas.user import UserDTO, UserSummaryDTO


def to_post_dto(view: PostView | Post) -> PostDTO:
    """게시글 뷰를 평면 PostDTO로 변환합니다.

    Copy id, title and content; flatten the optional category into
    ``category_id``/``category_name`` (both ``None`` when absent).

    Args:
        view: 게시글 뷰 또는 카테고리가 로드된 게시글 엔티티
              (Post view, or a post entity whose category is loaded)

    Returns:
        PostDTO: 평면 게시글 DTO (Flat post DTO)
    """
    category = view.category
    return PostDTO(
        id=view.id,
        title=view.title,
        content=view.content,
        category_id=category.id if category is not None else None,
        category_name=category.name if category is not None else None,
    )


def to_category_dto(category: Category) -> CategoryDTO:
    """카테고리를 CategoryDTO로 변환합니다 (id, name, description verbatim)."""
    return CategoryDTO(
        id=category.id,
        name=category.name,
        description=category.description,
    )


def to_user_dto(user: User, posts: Iterable[PostView | Post] | None = None) -> UserDTO:
    """사용자를 UserDTO로 변환합니다.

    Convert a user, embedding ``posts`` when given. Pass the user's loaded
    ``posts`` collection explicitly; it is never read implicitly.
    """
    return UserDTO(
        id=user.id,
        name=user.name,
        email=user.email,
        posts=[to_post_dto(post) for post in posts] if posts is not None else None,
    )


def to_user_summary_dto(summary: UserSummary) -> UserSummaryDTO:
    return UserSummaryDTO(id=summary.id, name=summary.name, email=summary.email)


def to_comment_dto(comment: CommentView | Comment) -> CommentDTO:
    """댓글 뷰 또는 작성자가 로드된 댓글을 CommentDTO로 변환합니다.

    Convert a comment view, or a comment entity whose user is loaded.
    """
    return CommentDTO(
        id=comment.id,
        text=comment.text,
        user_id=comment.user.id,
        user_name=comment.user.name,
        post_id=comment.post_id,
        created_at=comment.created_at,
    )


def to_post_detail_dto(post: Post) -> PostDetailDTO:
    """엔티티 그래프가 로드된 게시글을 상세 DTO로 변환합니다.

    Convert a post whose user, category and comments (with authors) are loaded.
    Comments are listed newest first.
    """
    comments = sorted(post.comments, key=lambda c: c.id, reverse=True)
    return PostDetailDTO(
        **to_post_dto(post).model_dump(),
        user_id=post.user.id,
        user_name=post.user.name,
        comments=[
            PostCommentDTO(
                id=c.id,
                text=c.text,
                user_id=c.user.id,
                user_name=c.user.name,
                created_at=c.created_at,
            )
            for c in comments
        ],
    )


def to_activity_dto(row: UserActivityReport) -> UserActivityDTO:
    return UserActivityDTO(
        user_id=row.user_id,
        user_name=row.user_name,
        activity_count=row.activity_count,
    )
