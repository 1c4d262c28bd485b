"""Database engine and schema setup."""
from taskhub.db.config import create_db_engine
from taskhub.db.init import init_db, seed_sample_data

__all__ = ["create_db_engine", "init_db", "seed_sample_data"]
