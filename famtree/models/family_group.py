from typing import TYPE_CHECKING
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import uuid4
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .user import User
    from .album import Album

familygroup_member = Table(
    "familygroup_member",
    Base.metadata,
    Column("group_id", String(36), ForeignKey("familygroup.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", String(36), ForeignKey("user.id", ondelete="CASCADE"), primary_key=True, index=True),
)

class FamilyGroup(Base):
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    created_by_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("user.id", ondelete="SET NULL"))
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    created_by: Mapped["User | None"] = relationship(foreign_keys=[created_by_id])
    members: Mapped[list["User"]] = relationship(secondary=familygroup_member, back_populates="family_groups")
    albums: Mapped[list["Album"]] = relationship(secondary="album_group", back_populates="shared_with_groups")
