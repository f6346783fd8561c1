"""PMO: Async SQLAlchemy engine and session factory."""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Build the async engine. Pool sizing only applies to server databases."""
    kwargs: dict = {"pool_pre_ping": True, "echo": echo}
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url:
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(pool_size=5, max_overflow=10)
    return create_async_engine(database_url, **kwargs)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
