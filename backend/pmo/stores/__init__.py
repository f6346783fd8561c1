"""PMO: Store construction from settings."""
from pmo.config import Settings
from pmo.stores.base import FilterClause, FilterOp, Store
from pmo.stores.memory import InMemoryStore


def build_store(settings: Settings) -> Store:
    backend = settings.STORE_BACKEND.lower()
    if backend == "memory":
        return InMemoryStore()
    if backend == "sql":
        from pmo.stores.sql import SqlAlchemyStore

        return SqlAlchemyStore(
            settings.DATABASE_URL,
            echo=settings.DEBUG,
            create_all=settings.DB_CREATE_ALL,
        )
    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND!r}")


__all__ = ["FilterClause", "FilterOp", "Store", "InMemoryStore", "build_store"]
