"""
Colonnes communes à toutes les tables : id auto-incrémenté et horodatage UTC.

Les dates sont déclarées `DateTime(timezone=True)` (timestamptz sous Postgres) ;
SQLite ne garde pas le fuseau, les valeurs naïves relues sont donc lues comme UTC.
"""

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_field(**kwargs):
    return Field(sa_type=DateTime(timezone=True), **kwargs)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = utc_field(default_factory=utcnow)
    updated_at: datetime = utc_field(default_factory=utcnow)
