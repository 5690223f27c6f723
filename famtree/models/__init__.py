from datetime import datetime, timezone
def utcnow():
    return datetime.now(timezone.utc)
from .user import User
from .family_group import FamilyGroup, familygroup_member
from .family_member import FamilyMember, familymember_child, familymember_partner
from .album import Album, album_group
from .auth import RefreshToken
