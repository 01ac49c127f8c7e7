"""리포트 관련 Pydantic 응답 스키마 정의.

Report Pydantic response schema definitions.
"""

from pydantic import BaseModel


class UserActivityDTO(BaseModel):
    """사용자 활동 리포트 행 (Comments plus likes per user)."""

    user_id: int
    user_name: str
    activity_count: int
