"""Database Package: declarative Base for the row-store tables.

Design Decisions:
    - asyncpg driver for the hosted PostgreSQL row-store; aiosqlite in tests
"""
