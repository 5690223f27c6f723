from pydantic import EmailStr
from .common import ORMModel

class UserOut(ORMModel):
    id: str
    email: EmailStr
    username: str | None = None
    full_name: str | None = None
    is_active: bool

class UserBrief(ORMModel):
    id: str
    email: EmailStr
    full_name: str | None = None
