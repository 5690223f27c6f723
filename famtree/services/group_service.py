import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, update
from ..models.family_group import FamilyGroup, familygroup_member
from ..models.user import User
from ..models.family_member import FamilyMember

logger = logging.getLogger(__name__)


class GroupNameTaken(ValueError):
    pass


def get_by_name(db: Session, name: str) -> FamilyGroup | None:
    return db.execute(select(FamilyGroup).where(FamilyGroup.name == name)).scalar_one_or_none()

def create_group(db: Session, *, creator: User, name: str, description: str | None) -> FamilyGroup:
    name = name.strip()
    if get_by_name(db, name):
        raise GroupNameTaken(name)
    # the creator is always a member
    group = FamilyGroup(name=name, description=description or "", created_by_id=creator.id, members=[creator])
    db.add(group)
    db.commit()
    db.refresh(group)
    logger.info(f"Family group created: id={group.id}, name={group.name}, by={creator.id}")
    return group

def list_user_groups(db: Session, *, user_id: str) -> list[FamilyGroup]:
    q = (
        select(FamilyGroup)
        .join(familygroup_member, familygroup_member.c.group_id == FamilyGroup.id)
        .where(familygroup_member.c.user_id == user_id)
        .options(selectinload(FamilyGroup.members))
        .order_by(FamilyGroup.created_at)
    )
    return list(db.execute(q).scalars())

def get_group(db: Session, group_id: str) -> FamilyGroup | None:
    q = select(FamilyGroup).options(selectinload(FamilyGroup.members)).where(FamilyGroup.id == group_id)
    return db.execute(q).scalar_one_or_none()

def is_member(group: FamilyGroup, user_id: str) -> bool:
    return any(m.id == user_id for m in group.members)

def add_member(db: Session, *, group: FamilyGroup, user: User) -> FamilyGroup:
    if not is_member(group, user.id):
        group.members.append(user)
        db.commit()
        db.refresh(group)
        logger.info(f"User {user.id} added to group {group.id}")
    return group

def remove_member(db: Session, *, group: FamilyGroup, user_id: str) -> FamilyGroup:
    group.members = [m for m in group.members if m.id != user_id]
    db.commit()
    db.refresh(group)
    logger.info(f"User {user_id} removed from group {group.id}")
    return group

def update_group(db: Session, *, group: FamilyGroup, name: str | None, description: str | None) -> FamilyGroup:
    if name is not None and name.strip() and name.strip() != group.name:
        name = name.strip()
        if get_by_name(db, name):
            raise GroupNameTaken(name)
        group.name = name
    if description is not None:
        group.description = description
    db.commit()
    db.refresh(group)
    logger.info(f"Family group updated: id={group.id}, name={group.name}")
    return group

def delete_group(db: Session, *, group: FamilyGroup) -> None:
    # members tied to this group fall back to creator-only visibility
    db.execute(
        update(FamilyMember)
        .where(FamilyMember.associated_group_id == group.id)
        .values(associated_group_id=None)
    )
    db.delete(group)
    db.commit()
    logger.info(f"Family group deleted: id={group.id}")
