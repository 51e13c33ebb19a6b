from datetime import datetime, timezone
from sqlalchemy import BigInteger, Column, DateTime, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer, "sqlite")


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp"""
    return datetime.now(timezone.utc)


def timestamp_column() -> Column:
    """Fresh timezone-aware timestamp column (one per field)"""
    return Column(DateTime(timezone=True), nullable=False)


class BaseModel(SQLModel):
    pass
