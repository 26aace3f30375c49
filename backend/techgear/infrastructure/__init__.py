"""Infrastructure — database engine/session management and logging setup.

Invariants:
    - One async engine per DatabaseSessionManager
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver: the shop data lives in a single SQLite file
"""
