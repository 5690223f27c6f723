import os

# must be set before famtree.core.config is imported
os.environ["FAMTREE_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient

from famtree.db.base import Base
from famtree.db.session import engine, SessionLocal
from famtree.main import app
from famtree.models import User, FamilyGroup, FamilyMember, Album
from famtree.services.family_repository import FamilyRepository
from famtree.services.security import create_access_token


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def repo(db):
    return FamilyRepository(db)


@pytest.fixture()
def client(db):
    return TestClient(app)


@pytest.fixture()
def make_user(db):
    def _make(email: str, full_name: str | None = None) -> User:
        user = User(email=email, full_name=full_name, hashed_password="not-a-real-hash")
        db.add(user)
        db.commit()
        return user
    return _make


@pytest.fixture()
def make_group(db):
    def _make(name: str, creator: User, members: list[User] = ()) -> FamilyGroup:
        group = FamilyGroup(name=name, created_by_id=creator.id, members=[creator, *members])
        db.add(group)
        db.commit()
        return group
    return _make


@pytest.fixture()
def make_member(db):
    def _make(name: str, creator: User, group: FamilyGroup | None = None, **kwargs) -> FamilyMember:
        member = FamilyMember(
            name=name,
            created_by_id=creator.id,
            associated_group_id=group.id if group else None,
            **kwargs,
        )
        db.add(member)
        db.commit()
        return member
    return _make


@pytest.fixture()
def make_album(db):
    def _make(name: str, owner: User | None = None, groups: list[FamilyGroup] = (), description: str | None = None) -> Album:
        album = Album(
            name=name,
            description=description,
            owner_id=owner.id if owner else None,
            shared_with_groups=list(groups),
        )
        db.add(album)
        db.commit()
        return album
    return _make


@pytest.fixture()
def link(db):
    """link(parent, child) / link(a, b, partner=True)"""
    def _link(a: FamilyMember, b: FamilyMember, partner: bool = False) -> None:
        if partner:
            a.partners.append(b)
        else:
            a.children.append(b)
        db.commit()
    return _link


@pytest.fixture()
def auth_headers():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}
    return _headers
