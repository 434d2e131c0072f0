"""Shared base for SQLModel table entities"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from sqlmodel import SQLModel, Column
from sqlalchemy import BigInteger, DateTime, Integer

CENTS = Decimal("0.01")


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""
    pass


def id_column() -> Column:
    """Auto-increment primary key (BIGINT, INTEGER on SQLite so rowid aliasing works)"""
    return Column(
        BigInteger().with_variant(Integer(), "sqlite"),
        primary_key=True,
        autoincrement=True,
    )


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_column() -> Column:
    """Timezone-aware timestamp, stored in UTC"""
    return Column(DateTime(timezone=True), nullable=False)


def to_money(value) -> Decimal:
    """Quantize an amount to cents"""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
