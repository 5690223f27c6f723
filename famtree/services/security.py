import secrets
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
import jwt
from ..core.config import settings
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
ALGORITHM = "HS256"

def hash_password(p: str) -> str:
    # bcrypt only looks at the first 72 bytes
    p = p.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.hash(p)

def verify_password(p: str, hashed: str) -> bool:
    p = p.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.verify(p, hashed)

def create_access_token(sub: str, minutes: int | None = None) -> str:
    exp_min = minutes if minutes is not None else settings.ACCESS_TOKEN_MIN
    expire = datetime.now(timezone.utc) + timedelta(minutes=exp_min)
    payload = {"sub": sub, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> dict:
    """Raises jwt.PyJWTError on a bad signature or an expired token."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])

def new_refresh_token() -> tuple[str, datetime]:
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.REFRESH_TOKEN_DAYS)
    return secrets.token_urlsafe(48), expires_at
