from dataclasses import dataclass, field
from sqlalchemy import select, func, distinct
from sqlalchemy.orm import Session, selectinload

from ..models.album import Album, album_group
from ..models.family_group import FamilyGroup, familygroup_member
from ..models.family_member import FamilyMember, familymember_child


@dataclass(frozen=True)
class AlbumScope:
    """Where to look for an album: owned by a user, or shared with any of some groups."""
    owner_id: str | None = None
    group_ids: list[str] = field(default_factory=list)


class FamilyRepository:
    """
    Read-only queries the family assistant needs. Every call hits the
    session, nothing is cached between calls.
    """

    def __init__(self, db: Session):
        self.db = db

    # groups

    def find_groups_by_member(self, user_id: str) -> list[FamilyGroup]:
        q = (
            select(FamilyGroup)
            .join(familygroup_member, familygroup_member.c.group_id == FamilyGroup.id)
            .where(familygroup_member.c.user_id == user_id)
            .order_by(FamilyGroup.created_at, FamilyGroup.id)
        )
        return list(self.db.execute(q).scalars())

    def is_user_in_group(self, user_id: str, group_id: str | None) -> bool:
        if not group_id:
            return False
        q = select(familygroup_member.c.user_id).where(
            familygroup_member.c.group_id == group_id,
            familygroup_member.c.user_id == user_id,
        )
        return self.db.execute(q).first() is not None

    # albums

    def count_albums_by_owner(self, user_id: str) -> int:
        q = select(func.count(Album.id)).where(Album.owner_id == user_id)
        return self.db.execute(q).scalar_one()

    def count_albums_by_shared_groups(self, group_ids: list[str]) -> int:
        if not group_ids:
            return 0
        q = select(func.count(distinct(album_group.c.album_id))).where(album_group.c.group_id.in_(group_ids))
        return self.db.execute(q).scalar_one()

    def find_albums_by_owner(self, user_id: str) -> list[Album]:
        q = select(Album).where(Album.owner_id == user_id).order_by(Album.created_at, Album.id)
        return list(self.db.execute(q).scalars())

    def find_albums_by_shared_groups(self, group_ids: list[str]) -> list[Album]:
        if not group_ids:
            return []
        shared = select(album_group.c.album_id).where(album_group.c.group_id.in_(group_ids))
        q = select(Album).where(Album.id.in_(shared)).order_by(Album.created_at, Album.id)
        return list(self.db.execute(q).scalars())

    def find_album_by_name_case_insensitive(self, scope: AlbumScope, name: str) -> Album | None:
        q = select(Album).where(func.lower(Album.name) == func.lower(name))
        if scope.owner_id is not None:
            q = q.where(Album.owner_id == scope.owner_id)
        elif scope.group_ids:
            shared = select(album_group.c.album_id).where(album_group.c.group_id.in_(scope.group_ids))
            q = q.where(Album.id.in_(shared))
        else:
            return None
        q = q.order_by(Album.created_at, Album.id).limit(1)
        return self.db.execute(q).scalars().first()

    # family members

    def find_member_by_name_case_insensitive(self, name: str) -> FamilyMember | None:
        # fold both sides in SQL: SQLite's lower() only touches ASCII
        # duplicate names resolve to the oldest record
        q = (
            select(FamilyMember)
            .where(func.lower(FamilyMember.name) == func.lower(name))
            .order_by(FamilyMember.created_at, FamilyMember.id)
            .limit(1)
        )
        return self.db.execute(q).scalars().first()

    def find_members_with_child_id(self, member_id: str) -> list[FamilyMember]:
        q = (
            select(FamilyMember)
            .join(familymember_child, familymember_child.c.parent_id == FamilyMember.id)
            .where(familymember_child.c.child_id == member_id)
            .order_by(familymember_child.c.id)
        )
        return list(self.db.execute(q).scalars())

    def find_member_with_children_populated(self, member_id: str) -> FamilyMember | None:
        q = select(FamilyMember).options(selectinload(FamilyMember.children)).where(FamilyMember.id == member_id)
        return self.db.execute(q).scalar_one_or_none()

    def find_member_with_partners_populated(self, member_id: str) -> FamilyMember | None:
        q = select(FamilyMember).options(selectinload(FamilyMember.partners)).where(FamilyMember.id == member_id)
        return self.db.execute(q).scalar_one_or_none()
