from sqlalchemy.orm import Session
from sqlalchemy import select
import logging
from ..models.user import User
from .security import hash_password, verify_password

logger = logging.getLogger(__name__)

def create_user(db: Session, *, email: str, password: str, username: str | None, full_name: str | None) -> User:
    try:
        logger.info(f"Creating user: email={email}, username={username}")
        user = User(email=email, username=username, full_name=full_name, hashed_password=hash_password(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"User created successfully: id={user.id}, email={user.email}")
        return user
    except Exception as e:
        logger.error(f"Error creating user with email {email}: {str(e)}", exc_info=True)
        db.rollback()
        raise

def get_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()

def get_by_id_or_email(db: Session, value: str) -> User | None:
    return db.get(User, value) or get_by_email(db, value)

def authenticate(db: Session, email: str, password: str) -> User | None:
    user = get_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user
