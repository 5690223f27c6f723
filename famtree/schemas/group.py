from typing import List
from pydantic import BaseModel
from .common import ORMModel
from .user import UserBrief
class FamilyGroupCreate(BaseModel):
    name: str
    description: str | None = None
class AddMemberIn(BaseModel):
    user_id_or_email: str
class RemoveMemberIn(BaseModel):
    user_id: str
class FamilyGroupOut(ORMModel):
    id: str
    name: str
    description: str = ""
    created_by_id: str | None
    members: List[UserBrief] = []
class FamilyGroupUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
