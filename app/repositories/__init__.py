"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
member_repository implements the member search store (list, page and count
queries over member LEFT OUTER JOIN team); team_repository covers team lookups.
"""
