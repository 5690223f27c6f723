from typing import TYPE_CHECKING
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import uuid4
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .user import User
    from .family_group import FamilyGroup

album_group = Table(
    "album_group",
    Base.metadata,
    Column("album_id", String(36), ForeignKey("album.id", ondelete="CASCADE"), primary_key=True),
    Column("group_id", String(36), ForeignKey("familygroup.id", ondelete="CASCADE"), primary_key=True, index=True),
)

class Album(Base):
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    owner_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("user.id", ondelete="CASCADE"), index=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    owner: Mapped["User | None"] = relationship(foreign_keys=[owner_id])
    shared_with_groups: Mapped[list["FamilyGroup"]] = relationship(secondary=album_group, back_populates="albums")
