"""Database metadata — SQLAlchemy declarative Base shared by models and Alembic."""
