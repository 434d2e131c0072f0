"""RADIUS check entries

Rows in the FreeRADIUS `radcheck` table. Written at provisioning time and
read by the external RADIUS server; never interpreted here.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String
from src.domain.base import BaseModel, id_column

CLEARTEXT_PASSWORD = "Cleartext-Password"


class RadCheck(BaseModel, table=True):
    __tablename__ = "radcheck"
    __table_args__ = (
        Index('ix_radcheck_username', 'username'),
    )

    id: Optional[int] = Field(default=None, sa_column=id_column())
    username: str = Field(sa_column=Column(String(64), nullable=False, default=""))
    attribute: str = Field(sa_column=Column(String(64), nullable=False, default=""))
    op: str = Field(default=":=", sa_column=Column(String(2), nullable=False, default=":="))
    value: str = Field(sa_column=Column(String(253), nullable=False, default=""))
