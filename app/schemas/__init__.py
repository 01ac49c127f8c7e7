"""Pydantic 요청/응답 스키마 패키지.

Pydantic request/response schema package.
Response models are flat DTOs; nested storage shapes never leave the service layer.
"""
