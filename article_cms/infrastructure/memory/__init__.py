"""In-memory storage package."""

from .in_memory_store import InMemoryRecordStore, coerce_id
from .seed_data import seed_articles, seed_categories

__all__ = ["InMemoryRecordStore", "coerce_id", "seed_articles", "seed_categories"]
