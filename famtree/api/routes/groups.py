from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...schemas.group import FamilyGroupCreate, FamilyGroupUpdate, FamilyGroupOut, AddMemberIn, RemoveMemberIn
from ...services.group_service import (
    GroupNameTaken,
    create_group,
    list_user_groups,
    get_group,
    is_member,
    add_member,
    remove_member,
    update_group,
    delete_group,
)
from ...services.user_service import get_by_id_or_email
from ...models.family_group import FamilyGroup
from ...models.user import User
from ..deps import get_db, get_current_user
router = APIRouter()


def _owned_group(db: Session, group_id: str, current: User, action: str) -> FamilyGroup:
    group = get_group(db, group_id)
    if not group:
        raise HTTPException(404, "Family group not found")
    if group.created_by_id != current.id:
        raise HTTPException(403, f"Not authorized to {action} this family group")
    return group


@router.post("/", response_model=FamilyGroupOut, status_code=201)
def create(payload: FamilyGroupCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    if not payload.name.strip():
        raise HTTPException(400, "Group name is required")
    try:
        return create_group(db, creator=current, name=payload.name, description=payload.description)
    except GroupNameTaken:
        raise HTTPException(400, "A group with this name already exists.")

@router.get("/my", response_model=list[FamilyGroupOut])
def my_groups(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return list_user_groups(db, user_id=current.id)

@router.get("/{group_id}", response_model=FamilyGroupOut)
def get_one(group_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    group = get_group(db, group_id)
    if not group:
        raise HTTPException(404, "Family group not found")
    if not is_member(group, current.id):
        raise HTTPException(403, "Not authorized to access this family group")
    return group

@router.put("/{group_id}/add-member", response_model=FamilyGroupOut)
def add_group_member(group_id: str, payload: AddMemberIn, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    group = _owned_group(db, group_id, current, "add members to")
    target = get_by_id_or_email(db, payload.user_id_or_email.strip())
    if not target:
        raise HTTPException(404, "User not found")
    if is_member(group, target.id):
        raise HTTPException(400, "User is already a member of this group")
    return add_member(db, group=group, user=target)

@router.put("/{group_id}/remove-member", response_model=FamilyGroupOut)
def remove_group_member(group_id: str, payload: RemoveMemberIn, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    group = _owned_group(db, group_id, current, "remove members from")
    if payload.user_id == group.created_by_id:
        raise HTTPException(400, "Cannot remove the creator from the group")
    return remove_member(db, group=group, user_id=payload.user_id)

@router.put("/{group_id}", response_model=FamilyGroupOut)
def update(group_id: str, payload: FamilyGroupUpdate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    group = _owned_group(db, group_id, current, "update")
    try:
        return update_group(db, group=group, name=payload.name, description=payload.description)
    except GroupNameTaken:
        raise HTTPException(400, "A group with this name already exists.")

@router.delete("/{group_id}")
def delete(group_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    group = _owned_group(db, group_id, current, "delete")
    delete_group(db, group=group)
    return {"message": "Family group deleted successfully"}
