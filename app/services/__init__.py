"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services receive their repositories at construction, take the request session
explicitly on every call, and map results to DTOs before returning so no
lazy reference outlives the session.
"""
