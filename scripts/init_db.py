from famtree.db.session import engine
from famtree.db.base import Base
def init():
    Base.metadata.create_all(bind=engine)
if __name__ == "__main__":
    init()
    print(f"Database schema created at {engine.url}.")
