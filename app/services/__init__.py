"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
member_search_service turns search conditions into predicates and pages;
team_service lists teams. Services call repositories for DB operations.
"""
