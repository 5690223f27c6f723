from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import uuid4
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .user import User
    from .family_group import FamilyGroup

# Parent -> child edges. The surrogate id keeps the children list in insertion order.
familymember_child = Table(
    "familymember_child",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("parent_id", String(36), ForeignKey("familymember.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("child_id", String(36), ForeignKey("familymember.id", ondelete="CASCADE"), nullable=False, index=True),
    UniqueConstraint("parent_id", "child_id", name="uq_member_parent_child"),
)

# Stored one way per record; "A lists B as partner" says nothing about B's record.
familymember_partner = Table(
    "familymember_partner",
    Base.metadata,
    Column("member_id", String(36), ForeignKey("familymember.id", ondelete="CASCADE"), primary_key=True),
    Column("partner_id", String(36), ForeignKey("familymember.id", ondelete="CASCADE"), primary_key=True),
)

class FamilyMember(Base):
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_by_id: Mapped[str] = mapped_column(String(36), ForeignKey("user.id", ondelete="CASCADE"), index=True)
    associated_group_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("familygroup.id", ondelete="SET NULL"), index=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    created_by: Mapped["User"] = relationship(foreign_keys=[created_by_id])
    associated_group: Mapped["FamilyGroup | None"] = relationship(foreign_keys=[associated_group_id])

    children: Mapped[list["FamilyMember"]] = relationship(
        secondary=familymember_child,
        primaryjoin=lambda: FamilyMember.id == familymember_child.c.parent_id,
        secondaryjoin=lambda: FamilyMember.id == familymember_child.c.child_id,
        order_by=familymember_child.c.id,
    )
    partners: Mapped[list["FamilyMember"]] = relationship(
        secondary=familymember_partner,
        primaryjoin=lambda: FamilyMember.id == familymember_partner.c.member_id,
        secondaryjoin=lambda: FamilyMember.id == familymember_partner.c.partner_id,
    )
