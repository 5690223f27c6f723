from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
    # table names follow the class name: FamilyMember -> "familymember"
    @declared_attr.directive
    def __tablename__(cls) -> str:
        return cls.__name__.lower()
