from ..models.user import User
from ..models.family_group import FamilyGroup
from ..models.family_member import FamilyMember
from ..models.album import Album
from ..models.auth import RefreshToken
from ..db.base_class import Base
