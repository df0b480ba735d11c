from knowzone.db.repository import Repository
from knowzone.db.seed_data import seed_repository

__all__ = ["Repository", "seed_repository"]
