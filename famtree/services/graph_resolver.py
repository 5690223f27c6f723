"""
Relationship lookups over the family-member graph.

Only parent -> children edges are stored. Parents and siblings are derived
from them on every call.
"""
from dataclasses import dataclass, field
import logging

from ..models.family_member import FamilyMember
from .family_repository import FamilyRepository
from .intent_matcher import RelationKind

logger = logging.getLogger(__name__)


@dataclass
class MemberResult:
    name: str
    relation: RelationKind | None = None
    related: list[str] = field(default_factory=list)
    # person lookups ("who is X") fill these instead of `related`
    parents: list[str] = field(default_factory=list)
    partners: list[str] = field(default_factory=list)


def can_view_member(repo: FamilyRepository, member: FamilyMember, user_id: str) -> bool:
    if member.created_by_id == user_id:
        return True
    return repo.is_user_in_group(user_id, member.associated_group_id)


def find_parents(repo: FamilyRepository, member: FamilyMember) -> list[FamilyMember]:
    return repo.find_members_with_child_id(member.id)


def find_children(repo: FamilyRepository, member: FamilyMember) -> list[FamilyMember]:
    populated = repo.find_member_with_children_populated(member.id)
    return list(populated.children) if populated else []


def find_partners(repo: FamilyRepository, member: FamilyMember) -> list[FamilyMember]:
    populated = repo.find_member_with_partners_populated(member.id)
    return list(populated.partners) if populated else []


def find_siblings(repo: FamilyRepository, member: FamilyMember) -> list[FamilyMember]:
    """Everyone who shares at least one parent with `member`, never `member` itself."""
    seen = {member.id}
    siblings: list[FamilyMember] = []
    for parent in find_parents(repo, member):
        for child in find_children(repo, parent):
            if child.id in seen:
                continue
            seen.add(child.id)
            siblings.append(child)
    return siblings


RELATION_LOOKUPS = {
    RelationKind.PARENT: find_parents,
    RelationKind.CHILD: find_children,
    RelationKind.SIBLING: find_siblings,
    RelationKind.PARTNER: find_partners,
}


def _names(members: list[FamilyMember]) -> list[str]:
    return [m.name for m in members]


def resolve(repo: FamilyRepository, person_name: str, relation: RelationKind | None, user_id: str) -> MemberResult | None:
    """
    Look up `person_name` and the requested relatives.

    Returns None both when nobody has that name and when the user may not see
    the match, so callers cannot tell private members exist.
    """
    member = repo.find_member_by_name_case_insensitive(person_name)
    if not member or not can_view_member(repo, member, user_id):
        logger.debug(f"Member lookup '{person_name}' for user {user_id}: not visible")
        return None

    if relation is None:
        return MemberResult(
            name=member.name,
            parents=_names(find_parents(repo, member)),
            partners=_names(find_partners(repo, member)),
        )

    related = RELATION_LOOKUPS[relation](repo, member)
    return MemberResult(name=member.name, relation=relation, related=_names(related))
