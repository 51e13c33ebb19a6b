from typing import Optional
from fastapi import Header, status
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.immutability import register_immutability_listeners
from src.api.error import ClientError


def build_engine(db_uri: str, lock_timeout_seconds: Optional[float] = None) -> AsyncEngine:
    """Create the async engine; SQLite transactions start with BEGIN IMMEDIATE"""
    connect_args = {}
    is_sqlite = db_uri.startswith("sqlite")
    if is_sqlite and lock_timeout_seconds:
        connect_args["timeout"] = lock_timeout_seconds

    engine = create_async_engine(db_uri, echo=False, future=True, connect_args=connect_args)

    if is_sqlite:
        # pysqlite's implicit BEGIN would take the write lock only at the
        # first INSERT, letting two issuers deadlock on the lock upgrade
        @event.listens_for(engine.sync_engine, "connect")
        def _disable_implicit_begin(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine.sync_engine, "begin")
        def _begin_immediate(conn):
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


register_immutability_listeners()

engine = build_engine(ApplicationConfig.DB_URI, ApplicationConfig.INVOICE_LOCK_TIMEOUT_SECONDS)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> int:
    """Tenant identity as established by the upstream authentication layer"""
    if not x_user_id or not x_user_id.strip().isdigit():
        raise ClientError(
            Error(
                code="AUTHENTICATION_REQUIRED",
                message="X-User-Id header with a numeric user ID is required",
            ),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return int(x_user_id)
